import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from mindsync.api.base import api_router  # noqa: E402
from mindsync.api.errors import register_exception_handlers  # noqa: E402
from mindsync.config import STATE_DIR, SUPABASE_SERVICE_ROLE_KEY, SUPABASE_URL  # noqa: E402
from mindsync.infra.storage import FileStateStore  # noqa: E402
from mindsync.infra.supabase import get_supabase_client  # noqa: E402
from mindsync.infra.supabase.repositories import StudyReminderRepository  # noqa: E402
from mindsync.services.reminders import ReminderNotifier, ReminderScheduler  # noqa: E402
from mindsync.services.tracker import StudyTracker  # noqa: E402

logger = logging.getLogger(__name__)


async def fetch_active_reminders():
    return await StudyReminderRepository(get_supabase_client()).find_active()


@asynccontextmanager
async def lifespan(app: FastAPI):
    tracker = StudyTracker(FileStateStore(STATE_DIR))
    tracker.load()
    tracker.start()

    notifier = ReminderNotifier()
    scheduler = None
    if SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY:
        scheduler = ReminderScheduler(fetch_active_reminders, notifier)
        scheduler.start()
    else:
        logger.warning("Supabase is not configured; reminder scheduler disabled")

    app.state.tracker = tracker
    app.state.notifier = notifier
    app.state.scheduler = scheduler
    try:
        yield
    finally:
        if scheduler is not None:
            await scheduler.stop()
        await tracker.shutdown()


app = FastAPI(
    title="MindSync Backend API",
    description="Backend API for MindSync - study timer, bloom streaks, reminders and AI study planning",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Specify your frontend URL in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all API routes
app.include_router(api_router)
register_exception_handlers(app)


@app.get("/")
def read_root():
    return {
        "message": "MindSync Backend API",
        "docs": "/docs",
        "version": "1.0.0"
    }
