from typing import List, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    DATABASE_URL: str = "sqlite:///./portal_berita.db"
    
    # API
    API_TITLE: str = "Portal Berita API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    
    # Security
    SECRET_KEY: str
    # None = token tanpa klaim exp (berlaku sampai dicabut)
    ACCESS_TOKEN_EXPIRE_DAYS: Optional[int] = None
    
    # Storage gambar berita
    UPLOAD_DIR: str = "storage"
    STORAGE_URL_PREFIX: str = "/storage"
    MAX_UPLOAD_SIZE: int = 2048 * 1024
    
    # Membership
    MIN_UPGRADE_AMOUNT: int = 50000
    
    # Seed admin (dipakai oleh init_db)
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None
    
    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
