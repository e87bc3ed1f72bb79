"""Column layout of each ledger file; the header line is these names joined by "|"."""

SHOW_COLUMNS = ('id', 'singer', 'date', 'venue', 'type', 'price', 'seats', 'booked')

TICKET_COLUMNS = (
    'id',
    'ticket_number',
    'user_id',
    'show_id',
    'seat_number',
    'payment_method',
    'payment_account',
    'transaction_number',
    'status',
)

USER_COLUMNS = ('id', 'username', 'password')

# Separator of seat numbers inside the "booked" field
SEAT_SEPARATOR = ','
