"""Ask for an efficient visiting order of four stops.

Run with ``GEBETA_API_KEY`` set::

    python examples/optimization.py
"""

import asyncio

from gebeta_maps import GeoPoint, MapSDK, MapSDKError, NullLogger

STOPS = [
    GeoPoint(8.989022, 38.79036),
    GeoPoint(9.03045, 38.76530),
    GeoPoint(9.05045, 38.76530),
    GeoPoint(9.01045, 38.70530),
]


async def main() -> None:
    sdk = MapSDK.from_env(logger=NullLogger())
    try:
        response = await sdk.get_service().get_route_optimization(STOPS)
    except MapSDKError as exc:
        print(f"Optimization failed [{exc.code}]: {exc.message}")
        return
    print("Optimization response:", response)


if __name__ == "__main__":
    asyncio.run(main())
