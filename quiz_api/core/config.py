from __future__ import annotations

import json
import re
from typing import Annotated, List, Any
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator


class Settings(BaseSettings):
    # .env is optional; unknown keys in it are an error so typos surface early
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",
    )

    # General
    APP_NAME: str = "Quiz API"
    API_PREFIX: str = "/api"
    APP_ENV: str = Field(
        "dev",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Application environment: dev|staging|prod",
    )

    # Server
    BACKEND_HOST: str = Field(
        "0.0.0.0",
        validation_alias=AliasChoices("BACKEND_HOST", "app_host"),
        description="Interface to bind",
    )
    BACKEND_PORT: int = Field(
        8080,
        validation_alias=AliasChoices("BACKEND_PORT", "app_port"),
        description="Backend port to bind",
    )

    # Database
    DATABASE_URL: str = Field(
        "sqlite:///./quiz.db",
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
        description="SQLAlchemy URL of the relational store",
    )
    DB_ECHO: bool = Field(
        False,
        validation_alias=AliasChoices("DB_ECHO", "db_echo"),
        description="Log every SQL statement",
    )
    DB_CREATE_SCHEMA: bool = Field(
        True,
        validation_alias=AliasChoices("DB_CREATE_SCHEMA", "db_create_schema"),
        description="Create the quiz/questions tables on startup when missing",
    )

    # Logging
    LOG_LEVEL: str = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    # CORS origins
    FRONTEND_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    @field_validator("FRONTEND_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v: Any) -> Any:
        # env values come as a JSON list or as "a,b" / "a;b"
        if not isinstance(v, str):
            return v
        if v.lstrip().startswith("["):
            return json.loads(v)
        return [origin.strip() for origin in re.split(r"[,;]", v) if origin.strip()]

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()
