"""Loading of compiled (CSN JSON) models."""

import json
from pathlib import Path
from typing import Any, Union

from seedcheck.core.errors import ModelLoadError
from seedcheck.core.logging import get_logger

logger = get_logger(__name__)


def load_compiled_model(path: Union[str, Path]) -> dict[str, Any]:
    """Read a compiled model produced by ``cds compile '*' --to json``.

    Args:
        path: Path to the JSON file

    Returns:
        The parsed model; guaranteed to carry a ``definitions`` mapping

    Raises:
        ModelLoadError: If the file is missing, unreadable or not a model
    """
    model_path = Path(path)
    try:
        raw = model_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ModelLoadError(f"Cannot read compiled model: {exc}", path=str(model_path)) from exc

    try:
        model = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ModelLoadError(
            f"Compiled model is not valid JSON (line {exc.lineno})", path=str(model_path)
        ) from exc

    if not isinstance(model, dict) or not isinstance(model.get("definitions"), dict):
        raise ModelLoadError("Compiled model has no 'definitions' object", path=str(model_path))

    logger.debug("model_loaded", path=str(model_path), definitions=len(model["definitions"]))
    return model
