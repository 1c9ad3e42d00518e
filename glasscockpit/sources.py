"""Data sources that feed the airframe state."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum, auto

from glasscockpit.airframe import AirframeData

__all__ = [
    "DataSource",
    "AlbatrossDataSource",
    "SimulationState",
    "SimulatedDataSource",
]

logger = logging.getLogger(__name__)

_TICK = 1.0 / 24.0


class DataSource(ABC):
    """Something that supplies airframe data to the display."""

    def __init__(self) -> None:
        self.airframe = AirframeData()

    @abstractmethod
    def open(self) -> bool:
        """Open the connection to the data provider; True on success."""

    @abstractmethod
    def on_idle(self) -> bool:
        """Acquire new data; True when the airframe changed and needs redrawing."""


def _show_waiting_status(airframe: AirframeData) -> None:
    airframe.status_active = False
    airframe.director_active = False
    airframe.got_data = False
    airframe.status_text_nodata = "WAITING FOR CONNECTION"
    airframe.status_text1 = "YAW"
    airframe.status_text2 = "ALT"
    airframe.status_text3 = "BNK"
    airframe.status_text4 = "VEL"
    airframe.status_colour1 = 1
    airframe.status_colour2 = 1
    airframe.status_colour3 = 1
    airframe.status_colour4 = 1


class AlbatrossDataSource(DataSource):
    """Source for the vehicle's telemetry link; it has no connection yet."""

    def __init__(self) -> None:
        super().__init__()
        _show_waiting_status(self.airframe)
        logger.info("AlbatrossDataSource: NOT CONNECTED")

    def open(self) -> bool:
        return True

    def on_idle(self) -> bool:
        return False


class SimulationState(Enum):
    WAITING = auto()
    CONNECTING = auto()
    FD = auto()
    RUNNING = auto()


class SimulatedDataSource(DataSource):
    """Generates synthetic flight data, advancing 1/24 s on every idle call."""

    def __init__(self) -> None:
        super().__init__()
        _show_waiting_status(self.airframe)
        self.state = SimulationState.WAITING
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """Simulated time in seconds."""
        return self._elapsed

    def open(self) -> bool:
        return True

    def on_idle(self) -> bool:
        self._elapsed += _TICK
        t = self._elapsed
        air = self.airframe

        if self.state is SimulationState.WAITING:
            if t >= 1.0:
                air.status_text_nodata = "CONNECTED (TEST)"
                self.state = SimulationState.CONNECTING
                logger.info("TestDataSource: Connected (test mode).")
                return True
            return False

        if self.state is SimulationState.CONNECTING:
            if t >= 1.5:
                air.barometric_pressure = 1010.0
                air.gps_mode = 3
                air.gps_sats = 5
                air.got_data = True
                air.status_active = True
                self.state = SimulationState.FD
                logger.info("TestDataSource: Activated status display.")
            return False

        if self.state is SimulationState.FD and t >= 5.0:
            air.status_colour1 = 2
            air.status_colour2 = 2
            air.status_colour3 = 2
            air.status_colour4 = 2
            air.director_active = True
            self.state = SimulationState.RUNNING
            logger.info("TestDataSource: Flight Director on.")

        self._generate(t)
        return True

    def _generate(self, t: float) -> None:
        air = self.airframe
        heading = math.fmod(t * 15.0, 360.0)
        if heading < 0.0:
            heading += 360.0

        air.roll = 0.3 * math.sin(t) * 180 / math.pi
        air.pitch = 0.15 * math.cos(t) * 180 / math.pi
        air.true_heading = heading
        air.track_heading = 360 - heading

        air.airspeed_kt = t * 4
        air.vertical_speed_fpm = 200 * math.sin(t / 2 + 0.5)
        air.ground_speed_ms = 0.0

        air.accel_body_fwd = 0.0
        air.accel_body_right = 0.0
        air.accel_body_down = 1.0

        air.altitude_msl_feet = t * 15
        air.altitude_agl_feet = 0.0
        air.barometric_pressure = 1010.0

        air.latitude = -43.479 + 0.005 * t
        air.longitude = 172.523

        air.engine_rpm = 4500.0 + 4500.0 * math.sin(t / 2.2)
        air.engine_cht = 125.0 + 125.0 * math.sin(t / 2.5)
        air.engine_egt = 500.0 + 500 * math.sin(t / 3)
        air.engine_mixture = 8.0 + 8.0 * math.sin(t / 2)
        air.voltage_alternator = 0.0
        air.voltage_battery = 0.0

        air.internal_temp = 30 + 2 * math.sin(t / 100.0)
        air.external_temp = 10 - 2 * math.sin(t / 100.0)
        air.wind_speed = 10.0
        air.wind_direction = 360.0 - heading

        air.director_pitch = 0.0
        air.director_roll = 0.0
        air.director_heading = 10.0
        air.director_altitude = 400.0
        air.director_airspeed = 80.5