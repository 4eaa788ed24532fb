import sys

from pseudonymizer.config.settings import Settings
from pseudonymizer.logging.logger import Log
from pseudonymizer.processor.processor import build_processor, require_paths


def main() -> int:
    """Entry point: load settings -> build processor -> pseudonymize one dataset."""
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        input_path, output_path = require_paths(settings)
        processor = build_processor(settings)
        processor.process(input_path, output_path)
    except Exception as exc:
        Log.error(f"Run failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
