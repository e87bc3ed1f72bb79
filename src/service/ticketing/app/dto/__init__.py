"""Application layer DTOs"""

from src.service.ticketing.app.dto.purchase_dto import PurchaseResult
from src.service.ticketing.app.dto.ticket_view import TicketView

__all__ = ['PurchaseResult', 'TicketView']
