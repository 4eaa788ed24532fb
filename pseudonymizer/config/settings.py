from pathlib import Path

from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from pseudonymizer.anonymization.models import FieldCategory


class Settings(BaseSettings):
    """Application configuration loaded from environment variables and config.json."""

    model_config = SettingsConfigDict(
        env_file=".env",
        json_file="config.json",
        extra="ignore",
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    input_file_path: str = ""
    output_file_path: str = ""
    sheet_index: int = 0

    categories: list[FieldCategory] = [
        FieldCategory.PERSONAL_NAME,
        FieldCategory.IDENTIFIER,
        FieldCategory.ACCOUNT_NUMBER,
    ]
    identifier_column: str | int = "PAN"
    account_column: str | int = "Account Number"
    name_column: str | int = "Name"

    identifier_policy: str = "positional"
    random_seed: int | None = None
    max_generation_attempts: int = 1000
    placeholder_names_path: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    def column_for(self, category: FieldCategory) -> str:
        """Return the configured header name or 1-based position for *category*."""
        columns = {
            FieldCategory.IDENTIFIER: self.identifier_column,
            FieldCategory.ACCOUNT_NUMBER: self.account_column,
            FieldCategory.PERSONAL_NAME: self.name_column,
        }
        return str(columns[category])
