"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.ticket_status import TicketDisplayStatus, TicketStatus

__all__ = ['TicketDisplayStatus', 'TicketStatus']
