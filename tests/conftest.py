"""
Configuration for pytest tests.
"""

import os
import shutil
import tempfile
import pytest
from pathlib import Path

# Must be set before the app modules read them at import time
TEST_DATA_DIR = Path(tempfile.mkdtemp(prefix="videosummary_test_"))
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DATA_DIR / 'test.db'}"
os.environ["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY", "test_gemini_key")
os.environ["OPENROUTER_API_KEY"] = os.environ.get("OPENROUTER_API_KEY", "test_openrouter_key")
os.environ["LLM_PROVIDER"] = "gemini"
os.environ["TRANSCRIPT_LANGUAGES"] = "en,id"
os.environ["ENVIRONMENT"] = "development"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Create the database tables and clean up afterwards."""
    from app.db.database import init_db, engine

    init_db()

    yield

    engine.dispose()
    shutil.rmtree(TEST_DATA_DIR, ignore_errors=True)


@pytest.fixture
def db_session():
    """A database session with an empty analyses table."""
    from app.db.database import SessionLocal
    from app.db.models import VideoAnalysis

    db = SessionLocal()
    db.query(VideoAnalysis).delete()
    db.commit()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture
def analysis_json():
    """A well-formed model response."""
    return (
        '{"topic": "Nuclear fusion", '
        '"keyPoints": ["Fusion powers the sun", "Plasma must be confined"], '
        '"summary": "An overview of how fusion works and why it is hard."}'
    )
