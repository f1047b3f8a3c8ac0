"""Notification constants: channels, fixed texts and the seed templates."""

from django.db import models


class Channel(models.TextChoices):
    SMS = "SMS", "SMS"
    EMAIL = "EMAIL", "Email"


DEFAULT_EMAIL_SUBJECT = "Powiadomienie Serwisowe"
AI_EMAIL_SUBJECT = "Informacja o zleceniu {device}"

MISSING_PHONE_MESSAGE = "Brak numeru telefonu klienta."
MISSING_EMAIL_MESSAGE = "Brak adresu email klienta."
NOT_CONFIRMED_MESSAGE = "Serwis powiadomień nie potwierdził wysyłki."
DISPATCH_FAILED_MESSAGE = "Nie udało się wysłać powiadomienia. Błąd: {reason}"
SENT_MESSAGES = {
    Channel.SMS: "SMS został wysłany pomyślnie.",
    Channel.EMAIL: "Email został wysłany pomyślnie.",
}

NO_DIAGNOSIS_TEXT = "Brak diagnozy"
UNKNOWN_COST_TEXT = "?"

# A template is used for the "ready for pickup" prompt when its id contains
# READY_TEMPLATE_ID_MARKER or its name contains READY_TEMPLATE_NAME_MARKER.
READY_TEMPLATE_ID_MARKER = "ready"
READY_TEMPLATE_NAME_MARKER = "gotowe"

DEFAULT_TEMPLATES = [
    {
        "id": "sms-ready",
        "name": "SMS - Gotowe do odbioru",
        "type": Channel.SMS,
        "subject": "",
        "body": (
            "Dzień dobry. Twój sprzęt {{device}} jest gotowy do odbioru w serwisie "
            "Flewer. Koszt: {{cost}} PLN. Zapraszamy pn-pt 8-16."
        ),
    },
    {
        "id": "sms-diagnosis",
        "name": "SMS - Wynik diagnozy",
        "type": Channel.SMS,
        "subject": "",
        "body": (
            "Dzień dobry. Diagnoza sprzętu {{device}}: {{diagnosis}}. Szacowany koszt: "
            "{{cost}} PLN. Prosimy o decyzję. Serwis Flewer."
        ),
    },
    {
        "id": "email-invoice",
        "name": "Email - Faktura/Odbiór",
        "type": Channel.EMAIL,
        "subject": "Naprawa zakończona - Serwis Flewer",
        "body": (
            "Szanowny Kliencie {{customer}},\n\n"
            "Informujemy, że naprawa urządzenia {{device}} została zakończona.\n\n"
            "Zakres prac: {{diagnosis}}\n"
            "Całkowity koszt: {{cost}} PLN.\n\n"
            "Zapraszamy po odbiór.\n"
            "Pozdrawiamy,\n"
            "Zespół Flewer"
        ),
    },
    {
        "id": "email-received",
        "name": "Email - Potwierdzenie przyjęcia",
        "type": Channel.EMAIL,
        "subject": "Przyjęcie sprzętu - Serwis Flewer",
        "body": (
            "Dzień dobry {{customer}},\n\n"
            "Potwierdzamy przyjęcie urządzenia {{device}} do serwisu.\n"
            "Zgłoszona usterka: {{issue}}.\n\n"
            "Będziemy informować o postępach prac.\n\n"
            "Zespół Flewer"
        ),
    },
]
