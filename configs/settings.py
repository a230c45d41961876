import os
from dotenv import load_dotenv

load_dotenv()

PRSM_ROOT = os.getenv("PRSM_ROOT", os.getcwd())
CHANGELOG_PATH = os.getenv("PRSM_CHANGELOG", os.path.join(PRSM_ROOT, "CHANGELOG.md"))
