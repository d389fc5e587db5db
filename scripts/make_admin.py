"""Create the configured admin account, or promote it if it already exists."""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from lifelink import create_app
from lifelink.config import Config
from lifelink.services import get_services

app = create_app()

with app.app_context():
    user = get_services().accounts.seed_admin(
        email=Config.ADMIN_EMAIL,
        password=Config.ADMIN_PASSWORD,
        full_name=Config.ADMIN_NAME,
        blood_type=Config.ADMIN_BLOOD_TYPE,
        city=Config.ADMIN_CITY,
    )
    print(f"Admin ready: {user.email} (id={user.id})")
