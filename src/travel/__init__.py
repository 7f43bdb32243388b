"""
Travel Options Module

The catalogue of bookable flights, trains and buses:

- schemas.py: TravelOption, TravelType and list filter models
- service.py: TravelService - read access to the catalogue
- filters.py: search-form filtering over the returned options
- router.py: FastAPI endpoints under /travel-options
"""
