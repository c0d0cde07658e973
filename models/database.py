"""Database models and connection setup."""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from typing import Optional
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERS = "users"
PATIENTS = "patients"
MEAL_PLANS = "meal_plans"
ANAMNESIS = "anamnesis"
ENERGY_CALCULATIONS = "energy_calculations"


class Database:
    """Database connection manager."""

    def __init__(self, client: Optional[AsyncIOMotorClient] = None, db_name: Optional[str] = None):
        self.client = client
        self.db_name = db_name or settings.mongodb_db_name

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        return self.client[self.db_name]


async def connect_to_mongo() -> Database:
    """Create database connection."""
    database = Database(AsyncIOMotorClient(settings.mongodb_url))
    logger.info(f"Connected to MongoDB: {settings.mongodb_url}")
    return database


async def close_mongo_connection(database: Database):
    """Close database connection."""
    if database and database.client:
        database.client.close()
        logger.info("Disconnected from MongoDB")


async def create_indexes(db):
    """Create all collection indexes."""
    # Users collection
    await db[USERS].create_index([("email", ASCENDING)], unique=True)

    # Patients collection
    patients_collection = db[PATIENTS]
    await patients_collection.create_index([("email", ASCENDING)], unique=True)
    await patients_collection.create_index([("phone", ASCENDING)], unique=True)
    await patients_collection.create_index([("user", ASCENDING), ("createdAt", DESCENDING)])

    # One parent document per patient
    for name in (MEAL_PLANS, ANAMNESIS, ENERGY_CALCULATIONS):
        await db[name].create_index([("patient", ASCENDING)], unique=True)


async def init_mongo() -> Database:
    """Initialize MongoDB connection and all collections with indexes."""
    database = await connect_to_mongo()
    await create_indexes(database.db)
    logger.info("MongoDB initialized: All collections created with indexes")
    return database
