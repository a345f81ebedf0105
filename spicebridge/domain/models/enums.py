"""Option words accepted by the toolkit, as enumerations."""

from enum import Enum, IntEnum, IntFlag


class AberrationCorrection(str, Enum):
    NONE = "NONE"
    LT = "LT"
    LT_S = "LT+S"
    CN = "CN"
    CN_S = "CN+S"
    XLT = "XLT"
    XLT_S = "XLT+S"
    XCN = "XCN"
    XCN_S = "XCN+S"


class Axis(IntEnum):
    X = 1
    Y = 2
    Z = 3


class RelationalOperator(str, Enum):
    GREATER_THAN = ">"
    EQUAL = "="
    LESS_THAN = "<"
    ABSMAX = "ABSMAX"
    ABSMIN = "ABSMIN"
    LOCMAX = "LOCMAX"
    LOCMIN = "LOCMIN"


class ErrorAction(str, Enum):
    ABORT = "ABORT"
    REPORT = "REPORT"
    RETURN = "RETURN"
    IGNORE = "IGNORE"
    DEFAULT = "DEFAULT"


class ErrorDevice(str, Enum):
    SCREEN = "SCREEN"
    NULL = "NULL"
    FILE = "FILE"  # any other value is a log file path


class ErrorOutputItem(IntFlag):
    """Items the toolkit writes to its error device."""

    NONE = 0
    SHORT = 0x01
    EXPLAIN = 0x02
    LONG = 0x04
    TRACEBACK = 0x08
    ALL = SHORT | EXPLAIN | LONG | TRACEBACK
    DEFAULT = 0x10


class TimeScale(str, Enum):
    TAI = "TAI"
    TDT = "TDT"
    TDB = "TDB"
    ET = "ET"
    JDTDB = "JDTDB"
    JDTDT = "JDTDT"
    JED = "JED"


class EpochType(str, Enum):
    UTC = "UTC"
    ET = "ET"


class UTCTimeFormat(str, Enum):
    CALENDAR = "C"
    DAY_OF_YEAR = "D"
    JULIAN_DATE = "J"
    ISO_CALENDAR = "ISOC"
    ISO_DAY_OF_YEAR = "ISOD"


class KernelType(str, Enum):
    ALL = "ALL"
    SPK = "SPK"
    CK = "CK"
    PCK = "PCK"
    DSK = "DSK"
    EK = "EK"
    TEXT = "TEXT"
    META = "META"


class GeometricModel(str, Enum):
    POINT = "POINT"
    ELLIPSOID = "ELLIPSOID"
    DSK = "DSK/UNPRIORITIZED"


class SubpointMethod(str, Enum):
    NEAR_POINT_ELLIPSOID = "NEAR POINT/ELLIPSOID"
    INTERCEPT_ELLIPSOID = "INTERCEPT/ELLIPSOID"
    NADIR_DSK = "NADIR/DSK/UNPRIORITIZED"
    INTERCEPT_DSK = "INTERCEPT/DSK/UNPRIORITIZED"


class OccultationType(IntEnum):
    """Occultation codes returned by occult and the words gfoclt accepts."""

    TOTAL_BY_TARGET2 = -3
    ANNULAR_BY_TARGET2 = -2
    PARTIAL_BY_TARGET2 = -1
    NONE = 0
    PARTIAL_BY_TARGET1 = 1
    ANNULAR_BY_TARGET1 = 2
    TOTAL_BY_TARGET1 = 3


class OccultationSearch(str, Enum):
    FULL = "FULL"
    ANNULAR = "ANNULAR"
    PARTIAL = "PARTIAL"
    ANY = "ANY"


class CoordinateSystem(str, Enum):
    RECTANGULAR = "RECTANGULAR"
    LATITUDINAL = "LATITUDINAL"
    RA_DEC = "RA/DEC"
    SPHERICAL = "SPHERICAL"
    CYLINDRICAL = "CYLINDRICAL"
    GEODETIC = "GEODETIC"
    PLANETOGRAPHIC = "PLANETOGRAPHIC"


class CoordinateName(str, Enum):
    X = "X"
    Y = "Y"
    Z = "Z"
    RADIUS = "RADIUS"
    LONGITUDE = "LONGITUDE"
    LATITUDE = "LATITUDE"
    RANGE = "RANGE"
    RIGHT_ASCENSION = "RIGHT ASCENSION"
    DECLINATION = "DECLINATION"
    COLATITUDE = "COLATITUDE"
    ALTITUDE = "ALTITUDE"


class LongitudeType(str, Enum):
    PLANETOCENTRIC = "PLANETOCENTRIC"
    PLANETOGRAPHIC = "PLANETOGRAPHIC"


class CoverageLevel(str, Enum):
    SEGMENT = "SEGMENT"
    INTERVAL = "INTERVAL"


class TimeSystem(str, Enum):
    SCLK = "SCLK"
    TDB = "TDB"


class Units(str, Enum):
    RADIANS = "RADIANS"
    DEGREES = "DEGREES"
    ARCMINUTES = "ARCMINUTES"
    ARCSECONDS = "ARCSECONDS"
    HOURANGLE = "HOURANGLE"
    MINUTEANGLE = "MINUTEANGLE"
    SECONDANGLE = "SECONDANGLE"
    METERS = "METERS"
    KILOMETERS = "KILOMETERS"
    CENTIMETERS = "CENTIMETERS"
    MILLIMETERS = "MILLIMETERS"
    FEET = "FEET"
    INCHES = "INCHES"
    YARDS = "YARDS"
    STATUTE_MILES = "STATUTE_MILES"
    NAUTICAL_MILES = "NAUTICAL_MILES"
    AU = "AU"
    PARSECS = "PARSECS"
    LIGHTSECS = "LIGHTSECS"
    LIGHTYEARS = "LIGHTYEARS"
    SECONDS = "SECONDS"
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"
    JULIAN_YEARS = "JULIAN_YEARS"
    TROPICAL_YEARS = "TROPICAL_YEARS"
    YEARS = "YEARS"


class SeparationShape(str, Enum):
    POINT = "POINT"
    SPHERE = "SPHERE"


class FovAberrationCorrection(str, Enum):
    """Corrections accepted for rays, which have no light time."""

    NONE = "NONE"
    S = "S"
    XS = "XS"


class IlluminationAngleType(str, Enum):
    PHASE = "PHASE"
    INCIDENCE = "INCIDENCE"
    EMISSION = "EMISSION"


class SubpointSearchMethod(str, Enum):
    """Method words of the sub-observer point search, which predate subpnt's."""

    NEAR_POINT_ELLIPSOID = "NEAR POINT: ELLIPSOID"
    INTERCEPT_ELLIPSOID = "INTERCEPT: ELLIPSOID"


class FrameClass(IntEnum):
    INERTIAL = 1
    PCK = 2
    CK = 3
    TK = 4
    DYNAMIC = 5
    SWITCH = 6


class Ck05Subtype(IntEnum):
    """Packet layouts of CK type 5 and the number of values in each."""

    HERMITE = 0  # quaternion and its derivative: 8
    LAGRANGE = 1  # quaternion: 4
    HERMITE_WITH_AV = 2  # quaternion, av and both derivatives: 14
    LAGRANGE_WITH_AV = 3  # quaternion and av: 7

    @property
    def packet_size(self) -> int:
        return {0: 8, 1: 4, 2: 14, 3: 7}[self.value]


class ReferenceLocation(str, Enum):
    """Where the output frame of a fixed-point state is evaluated."""

    OBSERVER = "OBSERVER"
    TARGET = "TARGET"
    CENTER = "CENTER"
