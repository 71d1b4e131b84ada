"""
Pytest configuration and fixtures
"""
from pathlib import Path
import importlib.util
import sys

import pytest


# Define paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCRIPTS_DIR = PROJECT_ROOT / "scripts"

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def import_script(module_name: str):
    """
    Import a module from the scripts directory, which is not a package.

    Args:
        module_name: Name of the script without the .py suffix

    Returns:
        The imported module
    """
    module_path = SCRIPTS_DIR / f"{module_name}.py"
    spec = importlib.util.spec_from_file_location(module_name, module_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load module {module_name} from {module_path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def owner_config():
    """Minimal valid owner configuration."""
    return {
        "name": "Alice",
        "title": "Developer",
        "bio": "Full stack developer",
        "email": "alice@example.com",
    }


@pytest.fixture
def full_config(owner_config):
    """Owner configuration with social links and the dark theme."""
    return {
        **owner_config,
        "socialLinks": {
            "github": "https://github.com/alice",
            "linkedin": "https://linkedin.com/in/alice",
        },
        "theme": "dark",
    }


@pytest.fixture
def sample_project():
    """A complete project entry."""
    return {
        "id": "1",
        "title": "Test Project",
        "description": "A sample project",
        "technologies": ["React", "TypeScript"],
        "url": "https://project.com",
        "imageUrl": "https://image.com/project.jpg",
    }


@pytest.fixture
def portfolio_document(full_config, sample_project):
    """A document in the shape accepted by build_portfolio."""
    return {
        "config": full_config,
        "projects": [
            sample_project,
            {
                "id": "2",
                "title": "CLI Tool",
                "description": "Command line helper",
                "technologies": [],
                "url": "https://github.com/alice/cli",
            },
        ],
    }
