"""Tracking module for booking click analytics."""

from .booking_tracker import AnalyticsSink, BookingTracker

__all__ = ['AnalyticsSink', 'BookingTracker']
