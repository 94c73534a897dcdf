from app.core.database import SessionLocal, engine, Base
from app.core.seed import seed_reference_data_if_empty
from app.models.room_type import RoomType
from app.schemas.room import RoomCreate
from app.services.rooms import RoomManager

# make sure tables exist
Base.metadata.create_all(bind=engine)

db = SessionLocal()

seed_reference_data_if_empty(db)

types = {t.type: t.id for t in db.query(RoomType).all()}

rooms = [
    RoomCreate(name="101", description="Garden view", type_id=types["Single"], price=85, capacity=1, bath=1, bed=1),
    RoomCreate(name="102", description="Garden view", type_id=types["Double"], price=130, capacity=2, bath=1, bed=2),
    RoomCreate(name="201", description="Top floor, balcony", type_id=types["Suite"], price=260, capacity=4, bath=2, bed=2,
               amenities="balcony,minibar"),
]

manager = RoomManager(db)
for candidate in rooms:
    result = manager.create_room(candidate)
    if result.ok:
        print(f"Added room {result.value.name}")
    else:
        print(f"Skipped room {candidate.name}: {result.error.message}")

db.close()

print("Database seeded")
