"""Fetch directions between two points in Addis Ababa, through one waypoint.

Run with ``GEBETA_API_KEY`` set::

    python examples/directions.py
"""

import asyncio
import logging

from gebeta_maps import GeoPoint, MapSDK, MapSDKError


async def main() -> None:
    sdk = MapSDK.from_env(debug=True)

    origin = GeoPoint(latitude=8.987685259188599, longitude=38.764792722654455)
    destination = GeoPoint(latitude=9.087685259188599, longitude=38.764792722654455)
    waypoints = [GeoPoint(latitude=9.050942296370327, longitude=38.6874317938697)]

    try:
        response = await sdk.get_service().get_directions(origin, destination, waypoints, instruction=True)
    except MapSDKError as exc:
        print("Error fetching directions:", exc.to_dict())
        return
    print("Directions response:", response)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
