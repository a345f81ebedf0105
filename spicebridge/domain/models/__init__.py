# spicebridge/domain/models/__init__.py
from .units import (
    Angle,
    AngularRate,
    Distance,
    EphemerisPeriod,
    EphemerisTime,
    MassConstant,
    Speed,
)
from .vectors import (
    AngularVelocity,
    AzElVector,
    CylindricalVector,
    DimensionlessStateVector,
    DimensionlessVector,
    DistanceVector,
    GeodeticVector,
    GeodeticVectorRates,
    LatitudinalVector,
    PlanetographicVector,
    RADecVector,
    SphericalVector,
    StateVector,
    VelocityVector,
)
from .matrices import (
    EulerAngles,
    EulerAngularState,
    Quaternion,
    RotationMatrix,
    StateTransform,
)
from .geometry import (
    ConicElements,
    Ellipse,
    EphemerisTimeWindowSegment,
    Plane,
    TLEGeophysicalConstants,
    TwoLineElements,
    WindowSegment,
)
from .records import (
    CkPointingRecord,
    CkType2Record,
    FieldOfView,
    FrameInfo,
    IlluminationAngles,
    IlluminationConditions,
    KernelInfo,
    LocalSolarTime,
    Pointing,
    SpkType5Observation,
    SurfacePoint,
)
from .results import CallResult, Failure, LookupResult, NotFound, Success

__all__ = [
    "Angle",
    "AngularRate",
    "Distance",
    "EphemerisPeriod",
    "EphemerisTime",
    "MassConstant",
    "Speed",
    "AngularVelocity",
    "AzElVector",
    "CylindricalVector",
    "DimensionlessStateVector",
    "DimensionlessVector",
    "DistanceVector",
    "GeodeticVector",
    "GeodeticVectorRates",
    "LatitudinalVector",
    "PlanetographicVector",
    "RADecVector",
    "SphericalVector",
    "StateVector",
    "VelocityVector",
    "EulerAngles",
    "EulerAngularState",
    "Quaternion",
    "RotationMatrix",
    "StateTransform",
    "ConicElements",
    "Ellipse",
    "EphemerisTimeWindowSegment",
    "Plane",
    "TLEGeophysicalConstants",
    "TwoLineElements",
    "WindowSegment",
    "CkPointingRecord",
    "CkType2Record",
    "FieldOfView",
    "FrameInfo",
    "IlluminationAngles",
    "IlluminationConditions",
    "KernelInfo",
    "LocalSolarTime",
    "Pointing",
    "SpkType5Observation",
    "SurfacePoint",
    "CallResult",
    "Failure",
    "LookupResult",
    "NotFound",
    "Success",
]
