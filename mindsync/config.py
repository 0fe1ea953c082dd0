import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

# LLM
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
LLM_MODEL = os.getenv("MINDSYNC_LLM_MODEL", "gpt-4o")

# Local durable state (timer, bloom streak)
STATE_DIR = os.getenv("MINDSYNC_STATE_DIR", ".mindsync")
TIMEZONE = os.getenv("MINDSYNC_TIMEZONE", "UTC")

# Study goals
DAILY_GOAL_HOURS = 4  # 4 hours = 100% bloom
DAILY_GOAL_SECONDS = DAILY_GOAL_HOURS * 3600
WEEKLY_GOAL_HOURS = 40

# Reminders
REMINDER_POLL_SECONDS = int(os.getenv("MINDSYNC_REMINDER_POLL_SECONDS", "30"))
REMINDER_COOLDOWN_SECONDS = 60
