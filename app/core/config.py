import os
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings.
    """
    model_config = SettingsConfigDict(env_prefix="HR_CALIBRATION_", env_file=".env", extra="ignore")

    # Service Info
    service_name: str = "hr-rating-calibration"
    environment: str = "local"
    log_level: str = "INFO"
    library_log_level: str = "WARNING"
    
    # API 
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    default_user_id: str = "local"
    
    # Calibration
    default_deviation_threshold: float = 2.0
    
    # Datasets
    max_dataset_name_length: int = 100
    
    # Paths
    base_dir: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    datasets_path: str = os.path.join(base_dir, "data", "datasets.json")

settings = Settings()
