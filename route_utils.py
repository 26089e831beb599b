import math

EARTH_RADIUS_MILES = 3958.8


def round_miles(value):
    """Round a mileage to the nearest 0.1 mile, halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10


def calculate_distance(point1, point2):
    """
    Calculate the great-circle distance between two geographic points.

    Args:
        point1: (latitude, longitude) of first point
        point2: (latitude, longitude) of second point

    Returns:
        Haversine distance in miles, rounded to one decimal place
    """
    lat1, lon1 = point1
    lat2, lon2 = point2

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    h = (math.sin(d_lat / 2) ** 2
         + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2)
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return round_miles(EARTH_RADIUS_MILES * c)


def calculate_route_distance(route_points):
    """Calculate the total distance of a route through the given (lat, lon) points."""
    if len(route_points) < 2:
        return 0.0
    total_distance = 0.0
    for i in range(len(route_points) - 1):
        total_distance += calculate_distance(route_points[i], route_points[i + 1])
    return round_miles(total_distance)
