import yaml
from typing import Dict, Any
from .models import SystemConfig, QuirkConfig

class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> SystemConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> SystemConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Invalid configuration document: expected a mapping, got {type(data).__name__}")

        arch = str(data.get("architecture", "CHIP8")).upper()
        memory_size = self._parse_int(data.get("memory_size", 0x1000))

        # Parse Quirks
        quirks_data = data.get("quirks", {}) or {}
        defaults = QuirkConfig()
        quirks = QuirkConfig(
            shift_uses_vy=self._parse_bool(quirks_data.get("shift_uses_vy", defaults.shift_uses_vy)),
            index_overflow_sets_vf=self._parse_bool(
                quirks_data.get("index_overflow_sets_vf", defaults.index_overflow_sets_vf)),
            stack_depth_warning=self._parse_int(
                quirks_data.get("stack_depth_warning", defaults.stack_depth_warning)),
        )

        return SystemConfig(
            architecture=arch,
            memory_size=memory_size,
            quirks=quirks
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")

    def _parse_bool(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise ValueError(f"Invalid boolean value: {value}")
