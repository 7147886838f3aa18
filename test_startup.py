"""Simple startup test to verify application initialization.

This script tests that all components can be initialized without errors.
Tests individual components and imports without requiring the data service.
"""
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def test_config_loading():
    """Test that configuration can be loaded."""
    from app.config import Settings

    logger.info("Testing config loading...")

    settings = Settings()

    assert settings.places_api_base_url
    assert settings.server_port > 0
    assert settings.home_template == "index.html"
    assert settings.detail_template == "detalhe.html"

    logger.info("✓ Config loading successful")
    logger.info(f"  - Places data service: {settings.places_api_base_url}")
    logger.info(f"  - Public dir: {settings.public_dir}")


def test_config_json_file(tmp_path, monkeypatch):
    """Test that nested JSON config is flattened and env vars win."""
    from app.config import Settings

    config_file = tmp_path / "config.json"
    config_file.write_text(
        '{"_comment": "local", "places_api": {"places_api_base_url": "http://data:3000"},'
        ' "server": {"server_port": 9000}}',
        encoding="utf-8",
    )
    monkeypatch.setenv("CONFIG_FILE", str(config_file))
    monkeypatch.setenv("SERVER_PORT", "9100")

    settings = Settings()

    assert settings.places_api_base_url == "http://data:3000"
    assert settings.server_port == 9100


def test_service_imports():
    """Test that all modules can be imported."""
    logger.info("Testing imports...")

    from app.api import PlacesRepository
    from app.handlers import SiteHandler, PlacesDataHandler
    from app.pages import initialize_app
    from app.render import create_place_card
    from app.seed import denormalize

    assert all([PlacesRepository, SiteHandler, PlacesDataHandler, initialize_app,
                create_place_card, denormalize])

    logger.info("✓ All imports successful")


def test_container_wiring():
    """Test that the container injects the configured base URL."""
    from app.config import Settings
    from app.container import Container

    container = Container(Settings(places_api_base_url="http://data:3000/"))

    assert container.places_repository.base_url == "http://data:3000"
    assert container.site_handler.repository is container.places_repository


def test_fastapi_app_creation():
    """Test that FastAPI apps can be created."""
    logger.info("Testing FastAPI app creation...")

    from fastapi.testclient import TestClient

    from main import app
    from mock_api import app as data_app

    assert app.title == "Places Guide"

    client = TestClient(app)
    assert client.get("/health").status_code == 200
    assert client.get("/metrics").status_code == 200
    # Page routes resolve even before a handler is injected (503, not 404)
    for path in ("/", "/index.html", "/detalhe.html"):
        assert client.get(path, follow_redirects=False).status_code != 404
    assert client.get("/sobre.html").status_code == 404

    data_client = TestClient(data_app)
    assert data_client.get("/health").json() == {"status": "healthy"}
    assert data_client.get("/metrics").status_code == 200
    assert data_client.get("/places").status_code != 404

    logger.info("✓ FastAPI app creation successful")
    logger.info(f"  - Title: {app.title}")
    logger.info(f"  - Version: {app.version}")


if __name__ == "__main__":
    logger.info("=" * 60)
    logger.info("Places Guide Startup Tests")
    logger.info("=" * 60)

    try:
        test_config_loading()
        test_service_imports()
        test_container_wiring()
        test_fastapi_app_creation()
        logger.info("=" * 60)
        logger.info("✓ All startup tests passed!")
        logger.info("=" * 60)
        logger.info("To start the data service: python mock_api.py")
        logger.info("To start the site: python -m uvicorn main:app --host 0.0.0.0 --port 8080")
    except Exception as e:
        logger.error(f"✗ Startup test failed: {e}", exc_info=True)
        exit(1)
