from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = BASE_DIR / "data"
    PORT = 3000


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
