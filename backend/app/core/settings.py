import os


class Settings:
    def __init__(self):
        self.app_name = "Swamy Academy Billing"
        self.api_version = "1.0.0"
        self.environment = os.getenv("BILLING_ENVIRONMENT", "development")
        self.database_url = os.getenv("BILLING_DATABASE_URL", "sqlite:///./institute_billing.db")
        self.log_level = os.getenv("BILLING_LOG_LEVEL", "INFO")
        self.invoice_prefix = "SA"
        self.export_file_prefix = "swamy_academy"
        self.currency_code = "INR"
        self.display_timezone = "Asia/Kolkata"
        self.search_debounce_ms = 300
        self.students_key = "swamyAcademy_students"
        self.settings_key = "swamyAcademy_settings"
        self.invoice_counter_key = "swamyAcademy_invoiceCounter"
        self.user_role_key = "swamyAcademy_userRole"


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
