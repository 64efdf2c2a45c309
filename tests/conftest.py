"""Pytest configuration for the rc2po test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

EN_US_RC = """\
#define FONT_NAME "Segoe UI"
#define FONT_SIZE 9
#define IDS_LANG_ENUS "English (United States)"

MainMenu MENU DISCARDABLE
BEGIN
    POPUP "&Action"
    BEGIN
        MENUITEM "&Hard Reset...", IDM_ACTION_HRESET
        MENUITEM "E&xit", IDM_ACTION_EXIT
    END
    POPUP "&View"
    BEGIN
        MENUITEM "&Status bar", IDM_VID_STATUS
        MENUITEM "E&xit", IDM_VID_EXIT
    END
END

STRINGTABLE DISCARDABLE
BEGIN
    2048    "86Box"
    IDS_2049 "Error"
    2050    "Unable to initialize " LIB_NAME_PCAP "!"
    2051    "Floppy images (*.86F;*.IMG)\\0*.86F;*.IMG\\0All files (*.*)\\0*.*\\0"
    2052    "Press ""OK"" to continue"
END
"""

DE_DE_RC = """\
#define FONT_NAME "Segoe UI"
#define FONT_SIZE 9
#define IDS_LANG_ENUS "Englisch (USA)"

MainMenu MENU DISCARDABLE
BEGIN
    POPUP "&Aktion"
    BEGIN
        MENUITEM "&Hard-Reset...", IDM_ACTION_HRESET
        MENUITEM "&Beenden", IDM_ACTION_EXIT
    END
    POPUP "&Ansicht"
    BEGIN
        MENUITEM "&Statusleiste", IDM_VID_STATUS
        MENUITEM "Schlie&ssen", IDM_VID_EXIT
    END
END

STRINGTABLE DISCARDABLE
BEGIN
    2048    "86Box"
    IDS_2049 "Fehler"
    2050    "Kann " LIB_NAME_PCAP " nicht initialisieren"
    2051    "Disketten-Images (*.86F;*.IMG)\\0*.86F;*.IMG\\0Alle Dateien (*.*)\\0*.*\\0"
    2052    "Klicken Sie auf ""OK""\"
END
"""


@pytest.fixture
def languages_dir(tmp_path: Path) -> Path:
    """Input folder with an en-US reference script and a German translation."""
    directory = tmp_path / "win" / "languages"
    directory.mkdir(parents=True)
    (directory / "en-US.rc").write_text(EN_US_RC, encoding="utf-8")
    (directory / "de-DE.rc").write_text(DE_DE_RC, encoding="utf-8")
    (directory / "dialogs.rc").write_text('POPUP "&Ignored"\n', encoding="utf-8")
    return directory


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "qt" / "languages"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture(autouse=True)
def _reset_rc2po_logger() -> Iterator[None]:
    """Undo CLI logging configuration so caplog sees records again."""
    logger = logging.getLogger("rc2po")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
