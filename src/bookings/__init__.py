"""
Booking Module

Booking lifecycle and seat inventory for the Travely booking system.

Key Components:
- booking_service.py: BookingService - create, look up and cancel bookings while
  keeping every option's available seats within [0, total seats]
- views.py: current/past partition and optimistic cancellation for clients
- router.py: FastAPI endpoints under /bookings
- schemas.py: Pydantic models for bookings and booking requests

Bookings hold a snapshot of the travel option taken when they were made, so
later seat or price changes never alter a past booking.
"""
