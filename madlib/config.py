from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Persistence
    database_url: str = "sqlite:///./madlib.sqlite3"

    # Chat grammar
    command_prefix: str = "madlib"

    # HTTP adapter
    api_title: str = "Madlib Plugin"

    class Config:
        env_file = ".env"
        env_prefix = "MADLIB_"


settings = Settings()
