# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-21
# Updated: 2026-10-02
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Correlation tool (corr)
# -----------------------------------------------------------------------------
CORR_DEFAULT_PORT = _env_int("CORR_DEFAULT_PORT", 3000)

# Accepted on the command line and logged; the vectors are precomputed
CORR_DEFAULT_MODEL = _env("CORR_DEFAULT_MODEL", "jina-embeddings-v3")

CORR_HOST = _env("CORR_HOST", "0.0.0.0")

# Axis labels longer than this are cut and suffixed with an ellipsis
LABEL_MAX_LEN = _env_int("CORR_LABEL_MAX_LEN", 32)

# Reject files whose rows disagree on embedding length
CORR_STRICT_DIMENSIONS = _env_bool("CORR_STRICT_DIMENSIONS", True)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if not (0 < CORR_DEFAULT_PORT < 65536):
    raise RuntimeError(f"CORR_DEFAULT_PORT must be a valid TCP port, got {CORR_DEFAULT_PORT}")

if LABEL_MAX_LEN < 1:
    raise RuntimeError(f"CORR_LABEL_MAX_LEN must be >= 1, got {LABEL_MAX_LEN}")
