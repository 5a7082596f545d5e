"""JSON configuration for the evaluation types (card bounds, rank order)."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import jsonschema

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parents[1] / "data" / "hand_evaluations"

EVALUATION_CONFIG_SCHEMA = {
    "type": "object",
    "required": ["id", "name", "min_cards", "max_cards"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "name": {"type": "string"},
        "description": {"type": "string"},
        "min_cards": {"type": "integer", "minimum": 1},
        "max_cards": {"type": "integer", "minimum": 1},
        "uses_board": {"type": "boolean"},
        "rank_order": {"enum": ["BASE_RANKS", "BADUGI_RANKS"]},
    },
}


class ConfigError(ValueError):
    """An evaluation configuration file is missing or invalid."""


@dataclass
class EvaluationConfig:
    """
    Settings shared by every evaluator of one type.

    Attributes:
        id: Evaluation type, matches the file name
        min_cards: Fewest cards (hand plus board) accepted
        max_cards: Most cards (hand plus board) accepted
        uses_board: Whether community cards take part in the hand
        rank_order: Key into RANK_ORDERS used to sort cards for display
    """

    id: str
    name: str
    description: str
    min_cards: int
    max_cards: int
    uses_board: bool = True
    rank_order: str = "BASE_RANKS"

    @classmethod
    def from_dict(cls, data: dict) -> 'EvaluationConfig':
        """Build a config from already validated JSON data."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            min_cards=data["min_cards"],
            max_cards=data["max_cards"],
            uses_board=data.get("uses_board", True),
            rank_order=data.get("rank_order", "BASE_RANKS"),
        )


class EvaluationConfigLoader:
    """Reads ``<type>.json`` files on first use and serves them by type."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Args:
            config_dir: Where the JSON files live. Defaults to the
                        package's data/hand_evaluations.
        """
        self.config_dir = config_dir if config_dir is not None else DEFAULT_CONFIG_DIR
        self._configs: Optional[Dict[str, EvaluationConfig]] = None

    def load_all_configs(self) -> None:
        """
        Read every configuration in the directory.

        Files that fail to parse or validate are logged and left out.

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        if self._configs is not None:
            return

        if not self.config_dir.is_dir():
            logger.error(f"Evaluation config directory missing: {self.config_dir}")
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        paths = sorted(self.config_dir.glob("*.json"))
        if not paths:
            logger.warning(f"No JSON configuration files found in {self.config_dir}")

        configs: Dict[str, EvaluationConfig] = {}
        for path in paths:
            try:
                config = self._load_config_file(path)
            except ConfigError as e:
                logger.error(f"Skipping {path}: {e}")
                continue
            configs[config.id] = config

        logger.info(f"Loaded {len(configs)} evaluation types from {self.config_dir}: {sorted(configs)}")
        self._configs = configs

    def _load_config_file(self, filepath: Path) -> EvaluationConfig:
        """
        Parse and validate one configuration file.

        Raises:
            ConfigError: Invalid JSON, a schema violation, an id that does
                         not match the file name, or min_cards > max_cards
        """
        try:
            data = json.loads(filepath.read_text())
            jsonschema.validate(instance=data, schema=EVALUATION_CONFIG_SCHEMA)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{filepath.name} is not valid JSON: {e}") from e
        except jsonschema.exceptions.ValidationError as e:
            raise ConfigError(f"{filepath.name} failed validation: {e.message}") from e

        if data["id"] != filepath.stem:
            raise ConfigError(f"{filepath.name} declares id '{data['id']}'")
        if data["min_cards"] > data["max_cards"]:
            raise ConfigError(f"{filepath.name}: min_cards is greater than max_cards")

        return EvaluationConfig.from_dict(data)

    def get_config(self, eval_type: str) -> Optional[EvaluationConfig]:
        """Configuration for ``eval_type`` ('high', 'badugi', ...), or None."""
        self.load_all_configs()
        return self._configs.get(eval_type)

    def get_all_configs(self) -> Dict[str, EvaluationConfig]:
        self.load_all_configs()
        return dict(self._configs)


evaluation_config_loader = EvaluationConfigLoader()


def get_evaluation_config(eval_type: str) -> Optional[EvaluationConfig]:
    return evaluation_config_loader.get_config(eval_type)
