#!/usr/bin/env python3
"""Configuration validation script.

Usage:
    python scripts/validate_config.py [CONFIG_DIR]

Validates audit.yaml in CONFIG_DIR (the repository config/ directory by
default) merged over the built-in defaults.
"""

import sys
from pathlib import Path
from typing import List, Optional

from report_audit.config.loader import ConfigLoader
from report_audit.config.validation import ConfigValidator, ValidationError
from report_audit.errors import ConfigurationError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main validation function."""
    argv = sys.argv[1:] if argv is None else argv
    config_dir = Path(argv[0]) if argv else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating {loader.config_file} ...")

    try:
        errors = validate_config_dir(config_dir)
    except ConfigurationError as e:
        print(f"❌ Could not load configuration: {e}")
        return 1

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value!r})")
        return 1

    config = loader.load()
    print("✅ Configuration is valid")
    print(f"   Step range: {config.safety.min_step}..{config.safety.max_step}")
    print(f"   Workers: {config.safety.max_workers}")
    print(f"   Skip blank lines: {config.parser.skip_blank_lines}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
