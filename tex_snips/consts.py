from os import environ
from pathlib import Path, PurePath

TOP_LEVEL = Path(__file__).resolve().parent

_ART_DIR = TOP_LEVEL / "artifacts"
ENVIRONMENTS_ARTIFACTS = _ART_DIR / "environments.yml"


DEFAULT_MODULE_PATH = PurePath("tex_snips", "snippet_module.py")
DEFAULT_EXPORT = "default"
DEFAULT_DESCRIPTION = "no description"

VISUAL_PLACEHOLDER = "${VISUAL}"

VAR_OPEN = "${"
VAR_CLOSE = "}"


DEBUG = "TEX_SNIPS_DEBUG" in environ
