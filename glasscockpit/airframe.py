"""The set of flight values shared between data sources and gauges."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["AirframeData"]


@dataclass
class AirframeData:
    """Current state of the airframe, as last reported by a data source."""

    # Heading and location
    roll: float = 0.0  # degrees about the axis of flight, right roll positive
    pitch: float = 0.0  # degrees from horizontal, pitch up positive
    true_heading: float = 0.0  # degrees
    track_heading: float = 0.0  # track over ground, degrees
    latitude: float = 0.0  # degrees, north positive
    longitude: float = 0.0  # degrees, east positive
    # Accelerations in the body frame, in g
    accel_body_fwd: float = 0.0
    accel_body_right: float = 0.0
    accel_body_down: float = 0.0

    # Speed
    airspeed_kt: float = 0.0  # true airspeed, knots
    ground_speed_ms: float = 0.0  # metres per second
    vertical_speed_fpm: float = 0.0  # feet per minute

    # Altitude
    altitude_agl_feet: float = 0.0
    altitude_msl_feet: float = 0.0
    barometric_pressure: float = 0.0  # hPa

    # Engine
    engine_rpm: float = 0.0
    engine_cht: float = 0.0  # cylinder head temperature, deg C
    engine_egt: float = 0.0  # exhaust gas temperature, deg C
    engine_mixture: float = 0.0  # percent, 0 lean to 100 rich
    voltage_alternator: float = 0.0
    voltage_battery: float = 0.0

    # Flight director
    director_active: bool = False
    director_roll: float = 0.0
    director_pitch: float = 0.0
    director_heading: float = 0.0
    director_altitude: float = 0.0
    director_airspeed: float = 0.0
    director_vertical_speed: float = 0.0  # feet per minute

    # Status panel and vehicle extras
    got_data: bool = False
    status_active: bool = False
    gps_mode: int = 0
    gps_sats: int = 0
    internal_temp: float = 0.0
    external_temp: float = 0.0
    wind_direction: float = 0.0
    wind_speed: float = 0.0
    # Status texts (at most three characters each)
    status_text1: str = ""
    status_text2: str = ""
    status_text3: str = ""
    status_text4: str = ""
    # Status text colours: 0 off, 1 red, 2 green
    status_colour1: int = 0
    status_colour2: int = 0
    status_colour3: int = 0
    status_colour4: int = 0
    # Shown while no data is coming in
    status_text_nodata: str = ""
    timestamp: float = 0.0