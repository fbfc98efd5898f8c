"""Fetch a distance matrix for three points.

Run with ``GEBETA_API_KEY`` set::

    python examples/matrix.py
"""

import asyncio

from gebeta_maps import GeoPoint, MapSDK, MapSDKError

LOCATIONS = [
    GeoPoint(8.989022, 38.79036),
    GeoPoint(9.03045, 38.76530),
    GeoPoint(9.05045, 38.76530),
]


async def main() -> None:
    sdk = MapSDK.from_env()
    try:
        response = await sdk.get_service().get_route_matrix(LOCATIONS)
    except MapSDKError as exc:
        print("Error fetching matrix:", exc.to_dict())
        return
    print("Matrix response:", response)


if __name__ == "__main__":
    asyncio.run(main())
