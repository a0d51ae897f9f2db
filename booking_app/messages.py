"""
User-facing error messages.

Each route has an "invalid" message (400) and a "failed" message (500).
Not-found messages are keyed by entity. Turkish is the default locale;
set MESSAGE_LOCALE=en for English.
"""

from .config import MESSAGE_LOCALE

MESSAGES = {
    "tr": {
        "routes": {
            "register_admin": ("Admin oluşturma başarısız", "Admin oluşturma başarısız"),
            "login_admin": ("Geçersiz email veya şifre", "Giriş işlemi başarısız"),
            "list_packages": ("Geçersiz filtre", "Paketler yüklenemedi"),
            "get_package": ("Geçersiz paket ID", "Paket yüklenemedi"),
            "create_package": ("Paket oluşturma başarısız", "Paket oluşturma başarısız"),
            "update_package": ("Paket güncelleme başarısız", "Paket güncelleme başarısız"),
            "create_customer": ("Müşteri kaydı başarısız", "Müşteri kaydı başarısız"),
            "get_customer": ("Geçersiz müşteri ID", "Müşteri yüklenemedi"),
            "list_appointments": ("Geçersiz filtre", "Randevular yüklenemedi"),
            "get_appointment": ("Geçersiz randevu ID", "Randevu yüklenemedi"),
            "create_appointment": ("Randevu oluşturma başarısız", "Randevu oluşturma başarısız"),
            "update_appointment": ("Randevu güncelleme başarısız", "Randevu güncelleme başarısız"),
            "get_available_slots": ("Tarih ve paket ID gerekli", "Uygun saatler yüklenemedi"),
            "create_booking": ("Rezervasyon başarısız", "Rezervasyon başarısız"),
            "list_payments": ("Geçersiz filtre", "Ödemeler yüklenemedi"),
            "get_payment": ("Geçersiz ödeme ID", "Ödeme yüklenemedi"),
            "create_payment": ("Ödeme kaydı başarısız", "Ödeme kaydı başarısız"),
            "update_payment": ("Ödeme güncelleme başarısız", "Ödeme güncelleme başarısız"),
            "list_sms_notifications": ("Geçersiz filtre", "SMS kayıtları yüklenemedi"),
            "update_sms_notification": ("SMS güncelleme başarısız", "SMS güncelleme başarısız"),
            "get_chat_messages": ("Geçersiz oturum", "Mesajlar yüklenemedi"),
            "create_chat_message": ("Mesaj gönderme başarısız", "Mesaj gönderme başarısız"),
            "get_monthly_report": ("Yıl ve ay parametreleri gerekli", "Rapor oluşturulamadı"),
        },
        "not_found": {
            "package": "Paket bulunamadı",
            "customer": "Müşteri bulunamadı",
            "appointment": "Randevu bulunamadı",
            "payment": "Ödeme bulunamadı",
            "sms": "SMS kaydı bulunamadı",
        },
        "invalid_request": "Geçersiz istek",
        "server_error": "Sunucu hatası",
        "inactive_package": "Paket şu anda aktif değil",
        "unknown_package": "Bilinmeyen Paket",
        "sms_confirmation": (
            "Merhaba {first_name}! {package_name} için randevunuz {date} "
            "tarihinde oluşturuldu. Teşekkürler!"
        ),
    },
    "en": {
        "routes": {
            "register_admin": ("Admin registration failed", "Admin registration failed"),
            "login_admin": ("Invalid email or password", "Login failed"),
            "list_packages": ("Invalid filter", "Could not load packages"),
            "get_package": ("Invalid package ID", "Could not load package"),
            "create_package": ("Package creation failed", "Package creation failed"),
            "update_package": ("Package update failed", "Package update failed"),
            "create_customer": ("Customer registration failed", "Customer registration failed"),
            "get_customer": ("Invalid customer ID", "Could not load customer"),
            "list_appointments": ("Invalid filter", "Could not load appointments"),
            "get_appointment": ("Invalid appointment ID", "Could not load appointment"),
            "create_appointment": ("Appointment creation failed", "Appointment creation failed"),
            "update_appointment": ("Appointment update failed", "Appointment update failed"),
            "get_available_slots": ("Date and package ID are required", "Could not load available slots"),
            "create_booking": ("Booking failed", "Booking failed"),
            "list_payments": ("Invalid filter", "Could not load payments"),
            "get_payment": ("Invalid payment ID", "Could not load payment"),
            "create_payment": ("Payment registration failed", "Payment registration failed"),
            "update_payment": ("Payment update failed", "Payment update failed"),
            "list_sms_notifications": ("Invalid filter", "Could not load SMS notifications"),
            "update_sms_notification": ("SMS update failed", "SMS update failed"),
            "get_chat_messages": ("Invalid session", "Could not load messages"),
            "create_chat_message": ("Message could not be sent", "Message could not be sent"),
            "get_monthly_report": ("Year and month parameters are required", "Could not build report"),
        },
        "not_found": {
            "package": "Package not found",
            "customer": "Customer not found",
            "appointment": "Appointment not found",
            "payment": "Payment not found",
            "sms": "SMS notification not found",
        },
        "invalid_request": "Invalid request",
        "server_error": "Server error",
        "inactive_package": "Package is not currently active",
        "unknown_package": "Unknown Package",
        "sms_confirmation": (
            "Hello {first_name}! Your appointment for {package_name} on {date} "
            "has been created. Thank you!"
        ),
    },
}


def _table() -> dict:
    return MESSAGES.get(MESSAGE_LOCALE, MESSAGES["tr"])


def invalid_message(route_name: str | None) -> str:
    """400 message for a route, falling back to the generic one"""
    entry = _table()["routes"].get(route_name or "")
    return entry[0] if entry else _table()["invalid_request"]


def failure_message(route_name: str | None) -> str:
    """500 message for a route, falling back to the generic one"""
    entry = _table()["routes"].get(route_name or "")
    return entry[1] if entry else _table()["server_error"]


def not_found(entity: str) -> str:
    return _table()["not_found"][entity]


def text(key: str) -> str:
    return _table()[key]
