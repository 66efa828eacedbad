"""
Configuration settings for the agency site backend.
"""
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class BusinessLocation(BaseModel):
    """
    Where the business operates, as advertised in structured data.

    Every LocalBusiness schema reads these values, so the service area is
    defined once here rather than at each call site.
    """
    country_code: str = "GB"
    region: str = "England"
    latitude: str = "51.5074"
    longitude: str = "-0.1278"
    opening_hours: str = "Mo-Fr 09:00-18:00"
    opening_days: List[str] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    opens: str = "09:00"
    closes: str = "18:00"
    price_range: str = "£300-£5000"
    service_area: str = "United Kingdom"
    service_radius_metres: str = "50000"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "EtherCore Site"
    ENVIRONMENT: str = Field("development", env="ENVIRONMENT")

    # Public site identity, used when company info is unavailable
    SITE_URL: str = Field("https://ether-core.com", env="SITE_URL")
    SITE_NAME: str = Field("EtherCore", env="SITE_NAME")
    SITE_LOGO_URL: str = Field(
        "https://www.ether-core.com/android-chrome-512x512.png", env="SITE_LOGO_URL"
    )

    # Supabase Configuration
    SUPABASE_URL: str = Field(..., env="SUPABASE_URL")
    SUPABASE_KEY: str = Field(..., env="SUPABASE_KEY")
    SUPABASE_TIMEOUT: int = Field(10, env="SUPABASE_TIMEOUT")

    # reCAPTCHA Configuration (verification is skipped when no secret is set)
    RECAPTCHA_SECRET_KEY: Optional[str] = Field(None, env="RECAPTCHA_SECRET_KEY")
    RECAPTCHA_VERIFY_URL: str = "https://www.google.com/recaptcha/api/siteverify"
    RECAPTCHA_TIMEOUT: int = 10

    DEFAULT_CURRENCY: str = "GBP"
    BUSINESS_LOCATION: BusinessLocation = BusinessLocation()

    POPUP_AUTO_OPEN_DELAY_SECONDS: float = 30.0
    SITEMAP_CACHE_SECONDS: int = 3600

    LOG_DIR: str = Field("logs", env="LOG_DIR")

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",
        "env_nested_delimiter": "__",
    }

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

settings = Settings()
