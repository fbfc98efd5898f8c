"""Fetch routes from one origin to several destinations.

Run with ``GEBETA_API_KEY`` set::

    python examples/onm.py
"""

import asyncio

from gebeta_maps import GeoPoint, MapSDK, MapSDKError

ORIGIN = GeoPoint(8.989022, 38.79036)
DESTINATIONS = [
    GeoPoint(9.03045, 38.76530),
    GeoPoint(9.05045, 38.76530),
    GeoPoint(9.01045, 38.70530),
]


async def main() -> None:
    sdk = MapSDK.from_env()
    try:
        response = await sdk.get_service().get_route_onm(ORIGIN, DESTINATIONS)
    except MapSDKError as exc:
        print("Error fetching one-to-many routes:", exc.to_dict())
        return
    print("ONM response:", response)


if __name__ == "__main__":
    asyncio.run(main())
