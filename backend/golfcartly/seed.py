"""
Seed a starter golf cart catalog.

Inserts brands, models, suppliers, parts and one sample GPS route. Rows are
matched on their unique name (part number for parts), so running the script
again only adds what is missing.

Usage:
    golfcartly-seed --all
    golfcartly-seed --brands --suppliers
    python -m golfcartly.seed --parts      # needs suppliers
"""
import argparse
import logging
import sys
from decimal import Decimal

from sqlalchemy.orm import Session

from golfcartly.core.database import SessionLocal, init_db
from golfcartly.models import Brand, GpsRoute, Part, Supplier, VehicleModel

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


BRANDS = [
    {
        "name": "Club Car",
        "description": "Golf, personal and utility carts built in Augusta, Georgia",
        "specialization": "Golf course fleets and personal transportation",
        "key_features": ["Aluminum frame", "Lithium-ion options", "AC drive"],
        "website_url": "https://www.clubcar.com",
        "market_position": "Premium",
        "models": [
            {"model_name": "Onward", "year": 2024, "vehicle_type": "LSV", "battery_type": "Lithium-ion",
             "voltage": "48V", "range": "40 miles", "top_speed": "25 mph", "seating_capacity": 4},
            {"model_name": "Precedent", "year": 2023, "vehicle_type": "Golf", "battery_type": "Lead-acid",
             "voltage": "48V", "range": "25 miles", "top_speed": "15 mph", "seating_capacity": 2},
        ],
    },
    {
        "name": "E-Z-GO",
        "description": "Golf carts and personal transportation vehicles",
        "specialization": "Fleet and personal carts",
        "key_features": ["ELiTE lithium", "Street-legal packages"],
        "website_url": "https://ezgo.txtsv.com",
        "market_position": "Mainstream",
        "models": [
            {"model_name": "Liberty", "year": 2024, "vehicle_type": "LSV", "battery_type": "Lithium-ion",
             "voltage": "72V", "range": "45 miles", "top_speed": "25 mph", "seating_capacity": 4},
            {"model_name": "RXV", "year": 2023, "vehicle_type": "Golf", "battery_type": "Lead-acid",
             "voltage": "48V", "range": "25 miles", "top_speed": "15 mph", "seating_capacity": 2},
        ],
    },
    {
        "name": "Yamaha",
        "description": "Golf cars with gas and electric drivetrains",
        "specialization": "Quiet gas and lithium drivetrains",
        "key_features": ["QuieTech EFI", "Independent rear suspension"],
        "website_url": "https://golf-car.yamaha-motor.com",
        "market_position": "Premium",
        "models": [
            {"model_name": "Drive2", "year": 2024, "vehicle_type": "NEV", "battery_type": "Lithium-ion",
             "voltage": "51V", "range": "35 miles", "top_speed": "19 mph", "seating_capacity": 2},
        ],
    },
    {
        "name": "ICON EV",
        "description": "Street-legal electric vehicles",
        "specialization": "Street-legal LSVs",
        "key_features": ["Street legal", "Touchscreen dash"],
        "market_position": "Value",
        "models": [
            {"model_name": "i40", "year": 2024, "vehicle_type": "Street Legal", "battery_type": "Lithium-ion",
             "voltage": "48V", "range": "40 miles", "top_speed": "25 mph", "seating_capacity": 4},
        ],
    },
]

SUPPLIERS = [
    {"name": "Buggies Unlimited", "location": "Georgia, USA", "specialization": "OEM and aftermarket parts"},
    {"name": "Golf Cart King", "location": "Florida, USA", "specialization": "Lift kits and accessories"},
]

PARTS = [
    {"part_number": "BAT-8V-170", "name": "8V Deep Cycle Battery", "category": "Batteries",
     "price": Decimal("189.99"), "supplier": "Buggies Unlimited",
     "compatible_brands": ["Club Car", "E-Z-GO"], "specifications": {"voltage": "8V", "amp_hours": 170}},
    {"part_number": "LI-48V-105", "name": "48V Lithium Conversion Kit", "category": "Batteries",
     "price": Decimal("2499.00"), "supplier": "Buggies Unlimited",
     "compatible_brands": ["Club Car", "E-Z-GO", "Yamaha"], "specifications": {"voltage": "48V", "amp_hours": 105}},
    {"part_number": "CTRL-48V-500", "name": "500A Speed Controller", "category": "Controllers",
     "price": Decimal("649.00"), "supplier": "Golf Cart King",
     "compatible_brands": ["Club Car"], "compatible_models": ["Precedent"], "specifications": {"amps": 500}},
    {"part_number": "TIRE-205-50-10", "name": "205/50-10 Street Tire", "category": "Tires",
     "price": Decimal("74.50"), "supplier": "Golf Cart King",
     "compatible_brands": ["Club Car", "E-Z-GO", "Yamaha", "ICON EV"]},
    {"part_number": "SOL-48V-HD", "name": "48V Heavy Duty Solenoid", "category": "Electrical",
     "price": Decimal("39.95"), "supplier": "Buggies Unlimited", "compatible_brands": ["E-Z-GO"]},
]

ROUTES = [
    {
        "name": "Neighborhood Loop",
        "description": "Residential streets with a 25 mph limit",
        "start_lat": Decimal("33.7490000"), "start_lng": Decimal("-84.3880000"),
        "end_lat": Decimal("33.7550000"), "end_lng": Decimal("-84.3900000"),
        "distance": Decimal("2.40"), "estimated_time": 12, "difficulty": "Easy",
        "vehicle_types": ["LSV", "NEV"], "road_types": ["residential"],
        "max_speed_limit": 25, "traffic_level": "Low", "scenic_rating": 3,
        "waypoints": [{"lat": 33.751, "lng": -84.389}, {"lat": 33.753, "lng": -84.3895}],
    },
]


def seed_brands(session: Session) -> int:
    """Seed brands and their models."""
    count = 0
    for brand_data in BRANDS:
        brand_data = dict(brand_data)
        models = brand_data.pop("models")
        brand = session.query(Brand).filter_by(name=brand_data["name"]).first()
        if brand is None:
            brand = Brand(**brand_data)
            session.add(brand)
            session.flush()
            count += 1

        for model_data in models:
            existing = session.query(VehicleModel).filter_by(
                brand_id=brand.id, model_name=model_data["model_name"]
            ).first()
            if existing is None:
                session.add(VehicleModel(brand_id=brand.id, **model_data))
                count += 1

    session.commit()
    logger.info(f"Seeded {count} brands and models")
    return count


def seed_suppliers(session: Session) -> int:
    count = 0
    for supplier_data in SUPPLIERS:
        if session.query(Supplier).filter_by(name=supplier_data["name"]).first():
            continue
        session.add(Supplier(**supplier_data))
        count += 1

    session.commit()
    logger.info(f"Seeded {count} suppliers")
    return count


def seed_parts(session: Session) -> int:
    count = 0
    for part_data in PARTS:
        part_data = dict(part_data)
        supplier_name = part_data.pop("supplier")
        if session.query(Part).filter_by(part_number=part_data["part_number"]).first():
            continue
        supplier = session.query(Supplier).filter_by(name=supplier_name).first()
        if supplier is None:
            logger.warning(f"Supplier {supplier_name} missing; seed suppliers first")
        session.add(Part(supplier_id=supplier.id if supplier else None, **part_data))
        count += 1

    session.commit()
    logger.info(f"Seeded {count} parts")
    return count


def seed_routes(session: Session) -> int:
    count = 0
    for route_data in ROUTES:
        if session.query(GpsRoute).filter_by(name=route_data["name"]).first():
            continue
        session.add(GpsRoute(**route_data))
        count += 1

    session.commit()
    logger.info(f"Seeded {count} routes")
    return count


def main():
    parser = argparse.ArgumentParser(description="Seed the golf cart catalog")
    parser.add_argument("--all", action="store_true", help="Seed everything")
    parser.add_argument("--brands", action="store_true", help="Seed brands and models")
    parser.add_argument("--suppliers", action="store_true", help="Seed suppliers")
    parser.add_argument("--parts", action="store_true", help="Seed parts")
    parser.add_argument("--routes", action="store_true", help="Seed GPS routes")
    args = parser.parse_args()

    if not any([args.all, args.brands, args.suppliers, args.parts, args.routes]):
        parser.print_help()
        return 1

    init_db()
    session = SessionLocal()
    try:
        total = 0
        if args.all or args.brands:
            total += seed_brands(session)
        if args.all or args.suppliers:
            total += seed_suppliers(session)
        if args.all or args.parts:
            total += seed_parts(session)
        if args.all or args.routes:
            total += seed_routes(session)
        logger.info(f"Seeding complete: {total} rows added")
    except Exception:
        session.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
