"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Test configuration template for rsvp-form-tester.
# Replace every <REQUIRED> placeholder before running.
# Commented keys show their defaults; uncomment them only when your page differs.

site:
  # Page hosting the RSVP form, e.g. http://localhost:8000/
  url: "<REQUIRED>"
  # browser: chromium   # chromium, firefox or webkit
  # headless: true

# testcases:
#   # Test table location, relative to the site root.
#   location: "test/test_validation.csv"

# submission:
#   # Requests whose URL contains this text are treated as form submissions.
#   endpoint_marker: "formResponse"

# timing:
#   settle_ms: 150
#   observe_ms: 300
#   between_tests_ms: 100

# form:
#   form_id: "rsvpForm"
#   success_message_id: "successMessage"
#   success_visible_class: "visible"
#   field_ids:
#     name: "name"
#   choice_ids:
#     attending:
#       "yes": "attending-yes"
#       "no": "attending-no"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML test configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder test configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Test configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
