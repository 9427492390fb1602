"""Application configuration loaded from environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    register_base_url: str = "http://www.health.act.gov.au"
    register_path: str = "/sites/default/files//Register%20of%20Food%20Offences_5.pdf"
    landing_page_path: str = (
        "/public-information/businesses/food-safety-regulation/register-food-offences"
    )
    last_known_link_text: str = Field(
        default="Register of Food Offences (updated 18 November 2016)",
        description="Link text of the register PDF as last seen on the landing page.",
    )
    request_timeout: float = 30.0

    store_path: str = "data/prosecutions.jsonl"

    geocoder_user_agent: str = "food-offences-register"
    geocode_locality: str = "Canberra, ACT"
    geocode_timeout: float = 10.0
    geocode_min_delay: float = 1.0

    pdf_line_tolerance: float = 2.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def register_url(self) -> str:
        return self.register_base_url + self.register_path

    @property
    def landing_page_url(self) -> str:
        return self.register_base_url + self.landing_page_path

    @property
    def store_path_obj(self) -> Path:
        return Path(self.store_path)


settings = Settings()
