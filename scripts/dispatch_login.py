"""Command line utility to run a single login dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.append(str(REPO_ROOT))

from app.config.login_config import LoginConfiguration  # noqa: E402
from app.controllers.main_controller import MainController  # noqa: E402
from app.dtos.auth_result import LoginOutcome  # noqa: E402
from app.dtos.credential_form import CredentialForm  # noqa: E402


def buildParser() -> argparse.ArgumentParser:
    """Create the argument parser for the login dispatcher.

    Returns
    -------
    argparse.ArgumentParser
        Parser with the credential and backend options.
    """

    parser = argparse.ArgumentParser(description="Ejecuta un inicio de sesión y muestra el resultado.")
    parser.add_argument("--username", help="Usuario a autenticar.")
    parser.add_argument("--password", help="Contraseña enviada en el formulario.")
    parser.add_argument(
        "--backend",
        choices=(LoginConfiguration.MEMORY_BACKEND, LoginConfiguration.SQLSERVER_BACKEND),
        help="Origen de credenciales; por defecto se toma de LOGIN_STORE_BACKEND.",
    )
    parser.add_argument("--users", help="Usuarios en memoria con formato usuario[:contraseña],otro.")
    parser.add_argument("--no-form", action="store_true", help="Despacha sin formulario.")
    parser.add_argument("--verbose", action="store_true", help="Muestra mensajes de depuración.")
    return parser


def buildConfiguration(args: argparse.Namespace) -> LoginConfiguration:
    """Merge the command line overrides over the environment configuration."""

    overrides: Dict[str, str] = LoginConfiguration().export()
    if args.backend:
        overrides[LoginConfiguration.BACKEND_KEY] = args.backend
    if args.users is not None:
        overrides[LoginConfiguration.USERS_KEY] = args.users
    return LoginConfiguration(env_files=(), environ=overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the dispatcher and return ``0`` only when the login succeeds."""

    args = buildParser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    controller = MainController(buildConfiguration(args))
    form = None if args.no_form else CredentialForm(username=args.username, password=args.password)
    outcome = controller.login.dispatch(form)
    print(outcome.value)
    return 0 if outcome == LoginOutcome.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())
