#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fortune_app.config.loader import ConfigLoader
from fortune_app.config.validation import ConfigValidator, ValidationError


def validate_merged_config(config_dir: Optional[str] = None) -> List[ValidationError]:
    """Validate the defaults merged with the YAML config file."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = sys.argv[1] if len(sys.argv) > 1 else None
    print("🔍 Validating fortune configuration...")

    try:
        errors = validate_merged_config(config_dir)
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
