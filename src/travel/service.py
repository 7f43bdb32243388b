from typing import List

from src.database import InMemoryStore
from src.exceptions import NotFoundError
from src.travel.schemas import TravelOption

class TravelService:
    """Read access to the travel option catalogue"""
    
    def __init__(self, db: InMemoryStore):
        self.db = db
    
    async def list_travel_options(self) -> List[TravelOption]:
        """All travel options, unfiltered; callers get copies"""
        await self.db.simulate_delay(500)
        return [option.model_copy() for option in self.db.travel_options]
    
    async def get_travel_option(self, travel_id: str) -> TravelOption:
        """Get travel option by ID (case-sensitive)"""
        await self.db.simulate_delay(300)
        option = self.db.find_travel_option(travel_id)
        if not option:
            raise NotFoundError("Travel option not found.")
        return option.model_copy()
