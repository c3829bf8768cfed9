from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    initial_capacity: int = Field(default=0, ge=0)
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    return Settings(
        initial_capacity=int(os.getenv("PARKING_INITIAL_CAPACITY", "0")),
        log_level=os.getenv("LOG_LEVEL", Settings.model_fields["log_level"].default).upper(),
    )
