"""Periodische Neuberechnung des Status (ersetzt den 60-Sekunden-UI-Timer)."""

import logging
import time
from datetime import datetime
from typing import Callable, Optional

from engine.clock import Clock
from engine.free_time import FreeTimeEngine
from models.status import FreeTimeStatus

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 60


class StatusPoller:
    """Fragt die Engine in festem Takt ab und reicht das Ergebnis weiter.

    Kein Thread: poll() blockiert, bis max_polls erreicht ist oder der
    Nutzer mit Ctrl+C abbricht. ``sleep`` ist austauschbar (Tests).
    """

    def __init__(
        self,
        engine: FreeTimeEngine,
        clock: Clock,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds muss > 0 sein (ist {interval_seconds})")
        self.engine = engine
        self.clock = clock
        self.interval_seconds = interval_seconds
        self._sleep = sleep
        # Zeitpunkt der letzten Abfrage, damit Anzeige und Status zusammenpassen
        self.last_polled_at: Optional[datetime] = None

    def poll_once(self) -> FreeTimeStatus:
        self.last_polled_at = self.clock.now()
        return self.engine.current_status(self.last_polled_at)

    def poll(
        self,
        on_status: Callable[[FreeTimeStatus], None],
        max_polls: Optional[int] = None,
    ) -> int:
        """Startet die Schleife. Gibt die Anzahl durchgeführter Abfragen zurück."""
        count = 0
        try:
            while max_polls is None or count < max_polls:
                on_status(self.poll_once())
                count += 1
                if max_polls is not None and count >= max_polls:
                    break
                self._sleep(self.interval_seconds)
        except KeyboardInterrupt:
            logger.info(f"Polling abgebrochen nach {count} Abfragen")
        return count
