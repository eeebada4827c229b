# scripts/search_hotels.py
import argparse
import json

from hotel_search.core.deps import get_hotel_service
from hotel_search.core.logging import configure_logging
from hotel_search.schemas.search import SearchFilter
from hotel_search.services.timers import Timers


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Search hotels and print them as JSON.")
    p.add_argument("--lat", type=float)
    p.add_argument("--lng", type=float)
    p.add_argument("--distance", type=float, help="max distance in km from --lat/--lng")
    p.add_argument("--price-min", type=float)
    p.add_argument("--price-max", type=float)
    p.add_argument("--surface-min", type=float)
    p.add_argument("--surface-max", type=float)
    p.add_argument("--rooms", type=int, help="min bedrooms")
    p.add_argument("--bath-rooms", type=int, help="min bathrooms")
    p.add_argument("--type", dest="types", action="append", default=[])
    p.add_argument("--timings", action="store_true", help="print timer summary at the end")
    return p.parse_args(argv)


def main(argv=None):
    configure_logging()
    args = parse_args(argv)

    filters = SearchFilter(
        lat=args.lat,
        lng=args.lng,
        distance=args.distance,
        price={"min": args.price_min, "max": args.price_max},
        surface={"min": args.surface_min, "max": args.surface_max},
        rooms=args.rooms,
        bath_rooms=args.bath_rooms,
        types=args.types,
    )

    service = get_hotel_service(timers=Timers() if args.timings else None)
    hotels = service.list(filters)
    print(json.dumps([h.model_dump() for h in hotels], indent=2))

    if args.timings:
        print(json.dumps(service.timers.summary(), indent=2))


if __name__ == "__main__":
    main()
