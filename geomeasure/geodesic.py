"""
Vincenty direct and inverse solutions of geodesics on the ellipsoid.

From: T Vincenty, "Direct and Inverse Solutions of Geodesics on the Ellipsoid
with application of nested equations", Survey Review, vol XXIII no 176, 1975.

Both solvers iterate to a tolerance of 1e-12 radians, capped at 200
iterations. The inverse solution can fail to converge for nearly antipodal
points; that surfaces as a ConvergenceFailure rather than an approximation.
"""

__all__ = [
    'Converged', 'Failed', 'GeodesicDirectResult', 'GeodesicInverseResult',
    'destination_point', 'final_bearing', 'final_bearing_on', 'geodesic_direct',
    'geodesic_inverse', 'initial_bearing', 'vincenty_distance',
]

import math
from typing import Any, NamedTuple, Union

from geomeasure._const import VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE
from geomeasure.coordinates import Point
from geomeasure.ellipsoids import WGS84, Ellipsoid
from geomeasure.exceptions import ConvergenceFailure
from geomeasure.typing import Number
from geomeasure.utils.functions import normalize_bearing, normalize_longitude, round_half_up
from geomeasure.utils.logging import LOGGER
from geomeasure.utils.validation import validate_inputs


class GeodesicInverseResult(NamedTuple):
    """Distance in meters (millimeter precision) and bearings in degrees [0, 360)"""
    distance_meters: float
    initial_bearing_deg: float
    final_bearing_deg: float


class GeodesicDirectResult(NamedTuple):
    destination: Point
    final_bearing_deg: float


class Converged(NamedTuple):
    value: Any
    iterations: int


class Failed(NamedTuple):
    iterations: int


SolverOutcome = Union[Converged, Failed]


def _series_coefficients(u_sq: float):
    """Vincenty's A and B coefficients (eq. 3, 4)"""
    A = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    B = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return A, B


def _delta_sigma(B: float, sinSigma: float, cosSigma: float, cos2SigmaM: float) -> float:
    """eq. 6"""
    return B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
    )


def _reduced_latitude(lat_radians: float, f: float):
    """sin/cos of the reduced latitude U, where tan U = (1 - f) tan φ"""
    tanU = (1 - f) * math.tan(lat_radians)
    cosU = 1 / math.sqrt(1 + tanU ** 2)
    return tanU, tanU * cosU, cosU


def _solve_inverse(
    p1: Point,
    p2: Point,
    ellipsoid: Ellipsoid,
    max_iterations: int = VINCENTY_MAX_ITERATIONS,
) -> SolverOutcome:
    """
    Iterates Vincenty's inverse formula. Returns Converged(GeodesicInverseResult)
    or Failed(iterations) - never raises for numeric input.
    """
    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f
    lat1, lon1 = p1.radians
    lat2, lon2 = p2.radians

    L = lon2 - lon1
    _, sinU1, cosU1 = _reduced_latitude(lat1, f)
    _, sinU2, cosU2 = _reduced_latitude(lat2, f)

    Lambda = L
    for iteration in range(1, max_iterations + 1):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            # Coincident points
            return Converged(GeodesicInverseResult(0.0, 0.0, 0.0), iteration)

        # eq. 15, 16
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            # Equatorial line
            cos2SigmaM = 0

        # eq. 10, 11
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) <= VINCENTY_TOLERANCE:
            break
    else:
        return Failed(max_iterations)

    u_sq = cosSqAlpha * ellipsoid.second_eccentricity_sq
    A, B = _series_coefficients(u_sq)
    s = b * A * (sigma - _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM))

    # eq. 20, 21
    alpha1 = math.atan2(cosU2 * math.sin(Lambda),
                        cosU1 * sinU2 - sinU1 * cosU2 * math.cos(Lambda))
    alpha2 = math.atan2(cosU1 * math.sin(Lambda),
                        -sinU1 * cosU2 + cosU1 * sinU2 * math.cos(Lambda))

    return Converged(
        GeodesicInverseResult(
            round_half_up(s, 3),
            normalize_bearing(math.degrees(alpha1)),
            normalize_bearing(math.degrees(alpha2)),
        ),
        iteration
    )


def _solve_direct(
    p1: Point,
    distance_meters: float,
    initial_bearing_deg: float,
    ellipsoid: Ellipsoid,
    max_iterations: int = VINCENTY_MAX_ITERATIONS,
) -> SolverOutcome:
    """
    Iterates Vincenty's direct formula. Returns Converged(GeodesicDirectResult)
    or Failed(iterations).
    """
    b, f = ellipsoid.b, ellipsoid.f
    lat1, lon1 = p1.radians
    alpha1 = math.radians(initial_bearing_deg)
    sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)

    tanU1, sinU1, cosU1 = _reduced_latitude(lat1, f)
    sigma1 = math.atan2(tanU1, cosAlpha1)
    sinAlpha = cosU1 * sinAlpha1
    cosSqAlpha = 1 - sinAlpha ** 2
    A, B = _series_coefficients(cosSqAlpha * ellipsoid.second_eccentricity_sq)

    sigma = distance_meters / (b * A)
    for iteration in range(1, max_iterations + 1):
        cos2SigmaM = math.cos(2 * sigma1 + sigma)
        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        sigma_prev = sigma
        sigma = distance_meters / (b * A) + _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)
        if abs(sigma - sigma_prev) <= VINCENTY_TOLERANCE:
            break
    else:
        return Failed(max_iterations)

    sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
    cos2SigmaM = math.cos(2 * sigma1 + sigma)

    tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
    lat2 = math.atan2(
        sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
        (1 - f) * math.sqrt(sinAlpha ** 2 + tmp ** 2)
    )
    lambda_val = math.atan2(
        sinSigma * sinAlpha1,
        cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
    )
    C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
    L = lambda_val - (1 - C) * f * sinAlpha * (
        sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
    )
    alpha2 = math.atan2(sinAlpha, -tmp)

    return Converged(
        GeodesicDirectResult(
            Point(math.degrees(lat2), normalize_longitude(math.degrees(lon1 + L))),
            normalize_bearing(math.degrees(alpha2)),
        ),
        iteration
    )


def _unwrap(outcome: SolverOutcome, operation: str):
    if isinstance(outcome, Failed):
        LOGGER.warning(
            'Vincenty %s formula did not converge within %d iterations',
            operation, outcome.iterations
        )
        raise ConvergenceFailure(operation, outcome.iterations)

    LOGGER.debug('Vincenty %s converged after %d iterations', operation, outcome.iterations)
    return outcome.value


@validate_inputs
def geodesic_inverse(
    p1: Point,
    p2: Point,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodesicInverseResult:
    """
    Solve the inverse geodesic problem: the distance and bearings between two
    points along the surface of an ellipsoid.

    Coincident points yield a distance of 0 with both bearings reported as 0.

    Args:
        p1:
            The start Point

        p2:
            The destination Point

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Raises:
        TypeMismatch: an argument is not of the expected type
        ConvergenceFailure: the formula did not converge (nearly antipodal points)

    Returns:
        GeodesicInverseResult
    """
    return _unwrap(_solve_inverse(p1, p2, ellipsoid), 'inverse')


@validate_inputs
def geodesic_direct(
    p1: Point,
    distance_meters: Number,
    initial_bearing_deg: Number,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodesicDirectResult:
    """
    Solve the direct geodesic problem: the destination reached by travelling a
    distance along a geodesic from a start point at a given initial bearing.

    Args:
        p1:
            The start Point

        distance_meters:
            Distance to travel along the geodesic, in meters

        initial_bearing_deg:
            Initial bearing, in degrees clockwise from north

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Raises:
        TypeMismatch: an argument is not of the expected type
        ConvergenceFailure: the formula did not converge

    Returns:
        GeodesicDirectResult, with the destination longitude in (-180, 180]
    """
    return _unwrap(
        _solve_direct(p1, distance_meters, initial_bearing_deg, ellipsoid),
        'direct'
    )


def vincenty_distance(p1: Point, p2: Point, ellipsoid: Ellipsoid = WGS84) -> float:
    """Ellipsoidal distance between two points, in meters"""
    return geodesic_inverse(p1, p2, ellipsoid).distance_meters


def initial_bearing(p1: Point, p2: Point, ellipsoid: Ellipsoid = WGS84) -> float:
    """Forward azimuth at p1 of the geodesic to p2, in degrees [0, 360)"""
    return geodesic_inverse(p1, p2, ellipsoid).initial_bearing_deg


def final_bearing(p1: Point, p2: Point, ellipsoid: Ellipsoid = WGS84) -> float:
    """Azimuth on arrival at p2 of the geodesic from p1, in degrees [0, 360)"""
    return geodesic_inverse(p1, p2, ellipsoid).final_bearing_deg


def destination_point(
    p1: Point,
    distance_meters: Number,
    initial_bearing_deg: Number,
    ellipsoid: Ellipsoid = WGS84,
) -> Point:
    """The Point reached from p1 after distance_meters at initial_bearing_deg"""
    return geodesic_direct(p1, distance_meters, initial_bearing_deg, ellipsoid).destination


def final_bearing_on(
    p1: Point,
    distance_meters: Number,
    initial_bearing_deg: Number,
    ellipsoid: Ellipsoid = WGS84,
) -> float:
    """Bearing on arrival after travelling distance_meters from p1 at initial_bearing_deg"""
    return geodesic_direct(p1, distance_meters, initial_bearing_deg, ellipsoid).final_bearing_deg
