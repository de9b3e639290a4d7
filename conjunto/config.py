from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()

class Settings(BaseModel):
    api_url: str = os.getenv("API_URL", "http://localhost:3001/api")
    api_timeout: float = 10.0
    storage_path: str = os.getenv("STORAGE_PATH", os.path.join(os.path.expanduser("~"), ".conjunto", "storage.json"))
    login_path: str = os.getenv("LOGIN_PATH", "/login")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
