"""Prompt builders for the AI assistant.

Prompts are written in Polish: the generated texts go straight to the
shop's customers and staff.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings

from modules.core.formatting import format_number

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.orders.models import Order

SYSTEM_PROMPT = "Jesteś pomocnym asystentem serwisu elektronarzędzi. Odpowiadasz po polsku."


def _pln(value) -> str:
    return f"{format_number(value)} PLN"


def notification_prompt(order: Order, customer: Customer, channel: str) -> str:
    shop = settings.SHOP_NAME
    cost = _pln(order.final_cost) if order.final_cost else "Do ustalenia"
    return f"""
Jesteś asystentem w serwisie elektronarzędzi '{shop}' ({settings.SHOP_WEBSITE}).
Wygeneruj krótką, uprzejmą wiadomość {channel} do klienta.

Dane klienta: {customer.name}
Sprzęt: {order.device_name}
Status: {order.get_status_display()}
Opis usterki: {order.issue_description}
Koszt: {cost}
Diagnoza: {order.diagnosis or 'W trakcie weryfikacji'}

Wiadomość ma informować o zmianie statusu.
Jeśli status to "GOTOWE DO ODBIORU", poproś o odbiór i podaj cenę.
Jeśli status to "DIAGNOZA", poinformuj, że sprawdzamy sprzęt.

Tylko treść wiadomości, bez zbędnych wstępów. Podpisz się jako "Zespół {shop}".
""".strip()


def diagnosis_prompt(device_name: str, issue_description: str) -> str:
    return f"""
Jesteś ekspertem serwisowym elektronarzędzi.
Sprzęt: {device_name}
Objawy: {issue_description}

Podaj listę 3 najbardziej prawdopodobnych przyczyn usterki oraz sugerowane kroki naprawcze.
Formatuj odpowiedź jako zwięzłą listę punktowaną.
""".strip()


def portal_prompt(order: Order, customer: Customer) -> str:
    if order.final_cost:
        cost = _pln(order.final_cost)
    elif order.estimated_cost:
        cost = f"Szacowany: {_pln(order.estimated_cost)}"
    else:
        cost = "W trakcie wyceny"
    return f"""
Jesteś wirtualnym asystentem na stronie internetowej serwisu {settings.SHOP_NAME}.
Klient {customer.name} pyta o status swojego zlecenia.

Dane zlecenia:
Urządzenie: {order.device_name}
Status: {order.get_status_display()}
Opis usterki zgłoszonej: {order.issue_description}
Diagnoza serwisu: {order.diagnosis or 'Brak wpisu'}
Koszt: {cost}
Notatki dla klienta: {order.technician_notes or 'Brak'}

Udziel uprzejmej, konkretnej odpowiedzi.
Jeśli status to 'GOTOWE DO ODBIORU', zachęć do wizyty.
Jeśli 'DIAGNOZA' lub 'W TRAKCIE', poproś o cierpliwość.
Nie używaj technicznego żargonu jeśli to nie konieczne.
Odpowiedź powinna być krótka i pomocna (max 3 zdania).
""".strip()
