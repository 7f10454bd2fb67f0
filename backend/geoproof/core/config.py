from pydantic import model_validator
from pydantic_settings import BaseSettings

from geoproof.core.field import HALF_MODULUS

class Settings(BaseSettings):
    PROJECT_NAME: str = "GEOPROOF"

    # Commitment hashing
    COMMITMENT_HASH: str = "pedersen"
    PEDERSEN_DOMAIN: str = "GEOPROOF-PEDERSEN-GRUMPKIN-v1"

    # Numeric safety bounds (must sit far below the field modulus)
    MAX_COORDINATE_DELTA: int = 2 ** 62
    MAX_SAFE_SQUARED_VALUE: int = 2 ** 126

    @model_validator(mode="after")
    def check_bounds(self) -> "Settings":
        if self.MAX_COORDINATE_DELTA <= 0 or self.MAX_SAFE_SQUARED_VALUE <= 0:
            raise ValueError("Numeric bounds must be positive")
        if self.MAX_SAFE_SQUARED_VALUE >= HALF_MODULUS:
            raise ValueError("MAX_SAFE_SQUARED_VALUE must be below MODULUS // 2")
        if 3 * self.MAX_COORDINATE_DELTA ** 2 > HALF_MODULUS:
            raise ValueError("MAX_COORDINATE_DELTA allows sums of squares to wrap")
        return self

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
