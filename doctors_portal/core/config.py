from pydantic_settings import BaseSettings
from typing import Optional, List
from urllib.parse import quote_plus
import os

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Doctors Portal"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    PORT: int = 5000

    # Database - MongoDB Atlas
    MONGODB_URI: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    MONGODB_CLUSTER_HOST: str = "cluster0.jmx7rsi.mongodb.net"
    DATABASE_NAME: str = "doctors_portal"

    # Firebase service account (JSON document)
    FIREBASE_SERVICE_ACCOUNT: Optional[str] = None

    # Stripe
    STRIPE_SECRET_KEY: Optional[str] = None
    PAYMENT_CURRENCY: str = "usd"

    # Doctor pictures are stored inline; MongoDB documents cap at 16 MB
    MAX_IMAGE_BYTES: int = 10 * 1024 * 1024

    # Feature modules
    ENABLE_DOCTORS: bool = True
    ENABLE_PAYMENTS: bool = True

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    @property
    def get_mongodb_uri(self) -> str:
        """Return the explicit URI, or build the Atlas SRV URI from credentials"""
        if self.MONGODB_URI:
            return self.MONGODB_URI
        user = quote_plus(self.DB_USER or "")
        password = quote_plus(self.DB_PASS or "")
        return f"mongodb+srv://{user}:{password}@{self.MONGODB_CLUSTER_HOST}/"

    def missing_required(self) -> List[str]:
        """Names of the environment variables the service cannot start without."""
        missing = []
        if not self.MONGODB_URI and not (self.DB_USER and self.DB_PASS):
            missing.append("MONGODB_URI or DB_USER/DB_PASS")
        if not self.FIREBASE_SERVICE_ACCOUNT:
            missing.append("FIREBASE_SERVICE_ACCOUNT")
        if self.ENABLE_PAYMENTS and not self.STRIPE_SECRET_KEY:
            missing.append("STRIPE_SECRET_KEY")
        return missing

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
