"""Data source fed by the flight simulator's UDP network protocol."""

from __future__ import annotations

import logging
import struct
from dataclasses import astuple, dataclass, fields
from typing import ClassVar, Optional

from glasscockpit.preferences import PreferenceManager
from glasscockpit.sources import DataSource

__all__ = ["FGData", "FGDataSource"]

logger = logging.getLogger(__name__)

_MIN_PORT = 1025
_MAX_PORT = 65535


@dataclass
class FGData:
    """One flight-model packet as sent by the simulator.

    The wire layout is the simulator's little-endian native structure,
    including its alignment padding.
    """

    barometric_pressure: float = 0.0
    external_temperature: float = 0.0
    wind_direction: float = 0.0  # /environment/wind-from-heading-deg
    wind_speed: float = 0.0  # /environment/wind-speed-kt
    director_airspeed: float = 0.0  # /controls/autoflight/speed-select
    director_vertical_speed: float = 0.0  # /controls/autoflight/vertical-speed-select
    director_roll: float = 0.0  # /controls/autoflight/bank-angle-select
    director_altitude: float = 0.0  # /controls/autoflight/altitude-select
    director_heading: float = 0.0  # /controls/autoflight/heading-select
    director_active: bool = False  # /controls/autoflight/autopilot[0]/engage
    voltage_battery: float = 0.0
    voltage_alternator: float = 0.0  # /controls/engines/engine[0]/generator
    engine_mixture: float = 0.0  # /controls/engines/engine[0]/mixture
    engine_egt: float = 0.0  # /engines/engine/egt-degf
    engine_cht: float = 0.0  # /engines/engine/cht-degf
    engine_rpm: float = 0.0  # /engines/engine/rpm
    vertical_speed_fpm: float = 0.0  # /velocities/vertical-speed-fps
    ground_speed_ms: float = 0.0
    airspeed_kt: float = 0.0  # /velocities/airspeed-kt
    accel_body_down: float = 0.0  # /accelerations/pilot/z-accel-fps_sec
    accel_body_right: float = 0.0  # /accelerations/pilot/y-accel-fps_sec
    accel_body_fwd: float = 0.0  # /accelerations/pilot/x-accel-fps_sec
    altitude_agl_feet: float = 0.0  # /position/altitude-agl-ft
    altitude_msl_feet: float = 0.0  # /position/altitude-ft
    longitude: float = 0.0  # /position/longitude-deg
    latitude: float = 0.0  # /position/latitude-deg
    track_heading: float = 0.0
    true_heading: float = 0.0  # /orientation/heading-deg
    pitch: float = 0.0  # /orientation/pitch-deg
    roll: float = 0.0  # /orientation/roll-deg
    magic: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<9f?3x14f2d4fI4x")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "FGData":
        """Decode one packet; the data must be exactly one packet long."""
        if len(data) != cls.SIZE:
            raise ValueError(f"FlightGear packet must be {cls.SIZE} bytes, got {len(data)}")
        return cls(*cls._STRUCT.unpack(data))

    def to_bytes(self) -> bytes:
        """Encode the packet in its wire layout."""
        values = astuple(self)
        if len(values) != len(fields(self)):
            raise ValueError("unexpected field count")
        return self._STRUCT.pack(*values)


class FGDataSource(DataSource):
    """Receives flight-model packets from the simulator.

    The receiving socket is not opened; the source validates its
    configuration and then reports no new data.
    """

    def __init__(self, preferences: Optional[PreferenceManager] = None) -> None:
        super().__init__()
        self._preferences = preferences
        self.host = ""
        self.receive_port = 0
        self.valid_connection = False
        self.buffer_length = FGData.SIZE
        self.last_packet: Optional[FGData] = None

    def open(self) -> bool:
        """Read host and port from the preferences and check the port."""
        prefs = self._preferences if self._preferences is not None else PreferenceManager.instance()
        self.host = prefs.get_string("FlightGearHost")
        self.receive_port = prefs.get_integer("FlightGearPort")
        logger.info('FGDataSource: host "%s", port %d', self.host, self.receive_port)

        if not _MIN_PORT <= self.receive_port <= _MAX_PORT:
            logger.error("FGDataSource: invalid port number.")
            return False
        return True

    def _receive(self) -> bool:
        return self.valid_connection and self.last_packet is not None

    def on_idle(self) -> bool:
        if not self.valid_connection:
            return False
        if not self._receive():
            return False
        return False