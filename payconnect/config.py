from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Payment gateway (BulkClix mobile money)
    BULKCLIX_API_KEY: str = Field(default="", description="BulkClix API key")
    BULKCLIX_BASE_URL: str = Field(default="https://api.bulkclix.com/api/v1/payment-api")
    BULKCLIX_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0, description="Timeout for payment initiation")
    PAYMENT_CALLBACK_URL: str = Field(default="https://payconnect-v2.onrender.com/api/payment-webhook")
    PAYMENT_REFERENCE: str = Field(default="PAYCONNECT")
    SUPPORTED_NETWORKS: list[str] = Field(default=["MTN", "TELECEL", "AIRTELTIGO"])

    # Record store (Baserow)
    BASEROW_HOST_URL: str = Field(default="https://api.baserow.io", description="Baserow host URL")
    BASEROW_API_KEY: str = Field(default="", description="Baserow database token")
    BASEROW_TABLE_ID: str = Field(default="", description="Baserow transactions table id")

    # SMS gateway (Hubtel)
    HUBTEL_CLIENT_ID: str = Field(default="")
    HUBTEL_CLIENT_SECRET: str = Field(default="")
    HUBTEL_SMS_URL: str = Field(default="https://smsc.hubtel.com/v1/messages/send")
    SMS_SENDER_ID: str = Field(default="PAYCONNECT", max_length=11)
    SUPPORT_WHATSAPP: str = Field(default="233531300654")
    SMS_ONCE_PER_ORDER: bool = Field(
        default=False,
        description="Skip the confirmation SMS when the record already shows it was sent",
    )

    # Server
    CORS_ALLOWED_ORIGINS: list[str] = Field(default=["*"])
    PORT: int = Field(default=10000, gt=0, le=65535)
    LOG_LEVEL: str = Field(default="INFO")

    def loaded_flags(self) -> dict[str, str]:
        """Report which credentials are configured, without their values."""
        keys = ("BULKCLIX_API_KEY", "BASEROW_API_KEY", "HUBTEL_CLIENT_ID", "HUBTEL_CLIENT_SECRET")
        return {key: "Loaded" if getattr(self, key) else "Missing" for key in keys}


settings = Settings()
