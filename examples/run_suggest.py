"""Minimal example showing how to check a text with calibrated worker settings."""

from __future__ import annotations

import logging
import shutil

from hunspell_dispatch import SuggestionEngine, load_config, probe_defaults
from hunspell_dispatch.validation import ResponseShape


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    config = load_config()
    if shutil.which(config.executable) is None:
        raise RuntimeError(
            f"{config.executable} is not on PATH; install hunspell before running "
            "this example."
        )
    config.dictionary = "en_US"
    config.encoding = "en_US.utf8"
    config.response_shape = ResponseShape.ARRAY

    calibration = probe_defaults(base_config=config, measure_ratio=False)
    engine = SuggestionEngine(calibration.apply(config))

    sample_text = (
        "Haters gonn hate. Potatoes gonna potate. Crocodiles gonna crocodile. "
        'The ranom "qwestion" is wether the threads keep their order.'
    )
    for suggestion in engine.suggest(sample_text):
        print(suggestion)


if __name__ == "__main__":
    main()
