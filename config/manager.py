"""Konfigurationsmanager: Laden, Speichern und Validieren des Wochenplans.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_schedule_config
from config.schema import ScheduleConfig

logger = logging.getLogger(__name__)
console = Console()

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120

# Lesen ohne Round-Trip-Typen → pydantic bekommt reine dicts/lists
_safe_yaml = YAML(typ="safe")


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# Freizeitplan — gemeinsamer Wochenplan
# Version: 1.0
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "timezone": (
        "Zeitzone",
        "IANA-Name, z.B. Europe/Berlin. Leer = lokale Systemzeit.",
    ),
    "poll_interval_seconds": (
        "Polling",
        "Wie oft 'watch' den Status neu berechnet (Sekunden).",
    ),
    "days": (
        "Wochenplan",
        "weekday: 1=Sonntag, 2=Montag, ..., 7=Samstag.\n"
        "Slots im Format HH:MM, chronologisch. Ende 23:59 = bis Tagesende.",
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "schedule.yaml"

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else self.DEFAULT_CONFIG

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.path.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> ScheduleConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = Path(path) if path is not None else self.path
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus, um den Plan anzulegen."
            )
        try:
            with open(target, "r", encoding="utf-8") as f:
                raw = _safe_yaml.load(f) or {}
        except YAMLError as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"YAML-Fehler: {e}"
            ) from e
        try:
            config = ScheduleConfig.model_validate(raw)
        except ValidationError as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e
        logger.info(f"Konfiguration geladen: {target} ({len(config.days)} Tage)")
        return config

    def load_or_default(self, path: Optional[Path] = None) -> ScheduleConfig:
        """Wie load(), fällt aber auf den Standard-Wochenplan zurück wenn keine Datei existiert."""
        target = Path(path) if path is not None else self.path
        if not target.exists():
            logger.warning(f"Keine Konfiguration unter {target} – verwende Standard-Wochenplan")
            return default_schedule_config()
        return self.load(target)

    # ─── Speichern ───

    def save(self, config: ScheduleConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit Kommentaren."""
        target = Path(path) if path is not None else self.path
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        logger.info(f"Konfiguration gespeichert: {target}")
        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")
        return target

    def _build_commented_yaml(self, config: ScheduleConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        return cm
