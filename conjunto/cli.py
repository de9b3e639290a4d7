#!/usr/bin/env python3
# =====================================================================
# LÍNEA DE COMANDOS DEL CONJUNTO
# =====================================================================
"""
Consulta y gestión del conjunto residencial desde la terminal.

Uso:
    conjunto login --email admin@conjunto.co --password secreto
    conjunto payments --month 2024-05 --search torre
    conjunto pay 12
    conjunto airbnb --status pending
    conjunto checkin 7
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys
from typing import Iterable, List, Optional, get_args

from pydantic import ValidationError

from conjunto.api_client import ApiClient
from conjunto.config import settings
from conjunto.exceptions import ConjuntoError
from conjunto.logging_config import setup_logging
from conjunto.navigation import Navigator
from conjunto.resources import ConjuntoApi
from conjunto.schemas import DamageStatus, GuestStatus, UserRole
from conjunto.services.auth_service import AuthService
from conjunto.storage import LocalStorage
from conjunto.views import AirbnbPage, DamageReportsPage, MaintenancePage, PaymentsPage, UsersPage
from conjunto.views.maintenance import classify_event_type, type_label
from conjunto.views.payments import apartment_label as payment_apartment_label, status_label
from conjunto.views.users import role_label


class CommandFailed(Exception):
    """La pantalla quedó con un banner de error"""


def _print_rows(rows: Iterable[str], empty: str) -> None:
    rows = list(rows)
    if not rows:
        print(empty)
        return
    for row in rows:
        print(row)


def _check(page) -> None:
    if page.error:
        raise CommandFailed(page.error)


# =====================================================================
# COMANDOS
# =====================================================================

async def cmd_login(api: ConjuntoApi, args) -> None:
    password = args.password or getpass.getpass("Contraseña: ")
    data = await AuthService(api).login(args.email, password)
    user = data.get("user") or {}
    print(f"✅ Sesión iniciada como {user.get('name') or args.email}")


async def cmd_logout(api: ConjuntoApi, args) -> None:
    AuthService(api).logout()
    print("Sesión cerrada")


async def cmd_whoami(api: ConjuntoApi, args) -> None:
    user = AuthService(api).current_user()
    if not user:
        raise CommandFailed("No hay sesión iniciada")
    print(f"{user.get('name')} <{user.get('email')}> ({role_label(user.get('role'))})")


async def cmd_apartments(api: ConjuntoApi, args) -> None:
    apartments = await api.get_apartments() or []
    _print_rows(
        (f"[{a.get('id')}] Torre {a.get('tower')} - Piso {a.get('floor')} - Apt {a.get('number')}"
         for a in apartments),
        "No hay apartamentos registrados.",
    )


async def cmd_payments(api: ConjuntoApi, args) -> None:
    page = PaymentsPage(api, month=args.month)
    await page.load()
    _check(page)
    _print_rows(
        (f"[{p.get('id')}] {payment_apartment_label(p)} · "
         f"{(p.get('user') or {}).get('name') or 'Usuario'} - {p.get('concept')} · "
         f"{status_label(p.get('status'))} · Vence: {p.get('dueDate') or 'N/A'} · ${p.get('amount')}"
         for p in page.filtered(args.search)),
        "No hay pagos registrados este mes.",
    )


async def cmd_pay(api: ConjuntoApi, args) -> None:
    page = PaymentsPage(api)
    if not await page.mark_as_paid(args.id):
        raise CommandFailed(page.error)
    print(f"Pago {args.id} registrado")


async def cmd_users(api: ConjuntoApi, args) -> None:
    page = UsersPage(api)
    await page.load()
    _check(page)
    _print_rows(
        (f"[{u.get('id')}] {u.get('name')} <{u.get('email')}> · {role_label(u.get('role'))}"
         for u in page.filtered(args.role, args.search)),
        "No hay residentes en esta categoría.",
    )


async def cmd_maintenance(api: ConjuntoApi, args) -> None:
    page = MaintenancePage(api)
    await page.load()
    _check(page)
    _print_rows(
        (f"[{e.get('id')}] ({classify_event_type(e.get('type'))}) {e.get('title')} · "
         f"{type_label(e.get('type'))} · {e.get('scheduledDate') or 'Sin fecha'} · Área: {e.get('area')}"
         for e in page.filtered(args.search)),
        "No hay eventos registrados.",
    )


async def cmd_damage_reports(api: ConjuntoApi, args) -> None:
    page = DamageReportsPage(api)
    await page.mount()
    _check(page)
    _print_rows(
        (f"[{r.get('id')}] {page.apartment_label(r)}· {r.get('title')} · "
         f"prioridad {r.get('priority')} · {r.get('status')}"
         for r in page.filtered(args.search, args.status)),
        "No hay reportes de daños.",
    )


async def cmd_airbnb(api: ConjuntoApi, args) -> None:
    page = AirbnbPage(api)
    await page.mount()
    _check(page)
    stats = page.stats()
    print(
        f"Activos: {stats['active']} · Total: {stats['total']} · "
        f"Pendientes check-in: {stats['pending_check_in']} · Check-ins hoy: {stats['check_ins_today']}"
    )
    _print_rows(
        (f"[{g.get('id')}] {page.apartment_label(g)} · {g.get('guestName')} ({g.get('guestCedula')}) · "
         f"{g.get('numberOfGuests')} huéspedes · {g.get('checkInDate')} → {g.get('checkOutDate')} · "
         f"{g.get('status')}"
         for g in page.filtered(args.search, args.status)),
        "No hay huéspedes registrados.",
    )


async def cmd_checkin(api: ConjuntoApi, args) -> None:
    page = AirbnbPage(api)
    if not await page.check_in(args.id):
        raise CommandFailed(page.error)
    print(f"Check-in del huésped {args.id} realizado")


# =====================================================================
# PARSER Y PUNTO DE ENTRADA
# =====================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="conjunto", description="Gestión del conjunto residencial")
    parser.add_argument("--api-url", default=None, help=f"URL del backend (default: {settings.api_url})")
    parser.add_argument("--storage", default=None, help="Archivo de sesión local")
    parser.add_argument("--log-level", default=None, help="Nivel de logging (INFO, DEBUG...)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("login", help="Iniciar sesión")
    p.add_argument("--email", required=True)
    p.add_argument("--password", help="Si se omite se pide por teclado")
    p.set_defaults(func=cmd_login, path=settings.login_path)

    sub.add_parser("logout", help="Cerrar sesión").set_defaults(func=cmd_logout)
    sub.add_parser("whoami", help="Usuario de la sesión actual").set_defaults(func=cmd_whoami)
    sub.add_parser("apartments", help="Listar apartamentos").set_defaults(func=cmd_apartments)

    p = sub.add_parser("payments", help="Listar pagos de administración")
    p.add_argument("--month", help="Mes a consultar (YYYY-MM)")
    p.add_argument("--search", default="")
    p.set_defaults(func=cmd_payments)

    p = sub.add_parser("pay", help="Registrar un pago como pagado")
    p.add_argument("id")
    p.set_defaults(func=cmd_pay)

    p = sub.add_parser("users", help="Listar residentes")
    p.add_argument("--role", default="all", choices=["all", *get_args(UserRole)])
    p.add_argument("--search", default="")
    p.set_defaults(func=cmd_users)

    p = sub.add_parser("maintenance", help="Listar mantenimientos y eventos")
    p.add_argument("--search", default="")
    p.set_defaults(func=cmd_maintenance)

    p = sub.add_parser("damage-reports", help="Listar mis reportes de daños")
    p.add_argument("--status", choices=get_args(DamageStatus))
    p.add_argument("--search", default="")
    p.set_defaults(func=cmd_damage_reports)

    p = sub.add_parser("airbnb", help="Huéspedes Airbnb y resumen")
    p.add_argument("--status", choices=get_args(GuestStatus))
    p.add_argument("--search", default="")
    p.set_defaults(func=cmd_airbnb)

    p = sub.add_parser("checkin", help="Check-in de un huésped Airbnb")
    p.add_argument("id")
    p.set_defaults(func=cmd_checkin)

    return parser


async def _dispatch(args, client: ApiClient) -> int:
    status = 0
    try:
        await args.func(ConjuntoApi(client), args)
    except ValidationError as exc:
        print(f"❌ Datos inválidos: {exc}", file=sys.stderr)
        status = 1
    except ConjuntoError as exc:
        message = exc.user_message or getattr(exc, "error", None) or str(exc)
        print(f"❌ {message}", file=sys.stderr)
        status = 1
    except CommandFailed as exc:
        print(f"❌ {exc}", file=sys.stderr)
        status = 1

    if client.navigator.history:
        print("Sesión expirada: inicia sesión de nuevo con `conjunto login`", file=sys.stderr)
    return status


async def run(args, client: Optional[ApiClient] = None) -> int:
    """Ejecuta el comando; si no se pasa cliente crea uno con la sesión local y lo cierra al final"""
    if client is not None:
        return await _dispatch(args, client)

    navigator = Navigator(current_path=getattr(args, "path", f"/{args.command}"))
    async with ApiClient(
        base_url=args.api_url,
        storage=LocalStorage(args.storage or settings.storage_path),
        navigator=navigator,
    ) as client:
        return await _dispatch(args, client)


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
