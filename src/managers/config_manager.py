"""
Config Manager

Loads YAML configuration (with include support) and builds the frozen
LightstageConfig used by the rest of the application.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from models.config import (
    LightstageConfig, StageConfig, BrightnessConfig, TransportConfig, InputConfig,
)
from models.enums import TransportKind, KeyboardKind
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


class ConfigManager:
    """
    Main configuration manager with include system support.

    config.yaml may either hold all sections directly or list modular files:

        include:
          - stage.yaml
          - hardware.yaml

    Example:
        config = ConfigManager().load()
        config.stage.node_count       # 143
        config.brightness.initial     # 200
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "config/config.yaml",
        defaults_path: Union[str, Path] = "config/factory_defaults.yaml",
    ):
        """
        Args:
            config_path: Main config file; relative paths resolve against src/
            defaults_path: Factory defaults used when the main file cannot be loaded
        """
        self.config_path = self._resolve(config_path)
        self.factory_defaults_path = self._resolve(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: Optional[LightstageConfig] = None

    @staticmethod
    def _resolve(path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else SRC_DIR / path

    def load(self) -> LightstageConfig:
        """
        Load and validate configuration.

        Process:
        1. Load main config.yaml
        2. If it has an 'include:' list, load and merge those files
        3. On any load failure fall back to factory defaults
        4. Build LightstageConfig (invalid values raise ValueError)
        """
        try:
            self.data = self._read_with_includes(self.config_path)
        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load config", path=str(self.config_path), error=str(ex))
            log.warn("Falling back to factory defaults", path=str(self.factory_defaults_path))
            self.data = self._read_yaml(self.factory_defaults_path)

        self.config = self.build(self.data)
        log.info(
            "Configuration loaded",
            nodes=self.config.stage.node_count,
            channels=self.config.stage.channel_count,
            transport=self.config.transport.kind.value,
            keyboard=self.config.input.keyboard.value,
        )
        return self.config

    # ===== File loading =====

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise yaml.YAMLError(f"{path.name}: top level must be a mapping")
        return data

    def _read_with_includes(self, path: Path) -> Dict[str, Any]:
        main_config = self._read_yaml(path)
        if "include" not in main_config:
            log.debug("Using monolithic configuration", path=str(path))
            return main_config

        log.debug("Using include-based configuration", path=str(path))
        merged = {k: v for k, v in main_config.items() if k != "include"}
        merged.update(self._load_includes(main_config["include"], path.parent))
        return merged

    def _load_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for filename in include_list:
            file_data = self._read_yaml(config_dir / filename)
            merged.update(file_data)
            log.debug(f"Loaded {filename}", keys=str(list(file_data.keys())))
        return merged

    # ===== Model building =====

    @classmethod
    def build(cls, data: Dict[str, Any]) -> LightstageConfig:
        """Build a LightstageConfig from a parsed YAML mapping."""
        stage = data.get("stage") or {}
        brightness = data.get("brightness") or {}
        transport = dict(data.get("transport") or {})
        input_cfg = dict(data.get("input") or {})

        if "kind" in transport:
            transport["kind"] = cls._enum(TransportKind, transport["kind"], "transport.kind")
        if "keyboard" in input_cfg:
            input_cfg["keyboard"] = cls._enum(KeyboardKind, input_cfg["keyboard"], "input.keyboard")

        try:
            return LightstageConfig(
                stage=StageConfig(**stage),
                brightness=BrightnessConfig(**brightness),
                transport=TransportConfig(**transport),
                input=InputConfig(**input_cfg),
            )
        except TypeError as ex:
            # Unknown key inside one of the sections
            raise ValueError(f"Invalid configuration: {ex}") from ex

    @staticmethod
    def _enum(enum_cls, value: str, key: str):
        try:
            return enum_cls(str(value).lower())
        except ValueError:
            valid = ", ".join(e.value for e in enum_cls)
            raise ValueError(f"{key}: '{value}' is not one of: {valid}") from None
