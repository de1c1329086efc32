from typing import Literal
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

class ReportConfig(BaseModel):
    undefined_scc: float = -100000.0
    low_tail: float = 0.0001
    high_tail: float = 0.9999

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RANDTEST_", env_nested_delimiter="__")

    chunk_size: int = 65536
    tail_method: Literal["gamma", "series"] = "gamma"
    report: ReportConfig = ReportConfig()

settings = Settings()
