"""Fixed assistant copy for the HAPPY HEARTS booking conversation."""

from happyhearts.schemas.booking_schema import BookingField

GREETING = (
    "Hello! I'm the HappyHearts WhatsApp Assistant. I'd be delighted to help you "
    "plan at HAPPY HEARTS – An Event Space. To get started, could you tell me your name?"
)

FIELD_QUESTIONS: dict[BookingField, str] = {
    BookingField.NAME: "May I know your name, please?",
    BookingField.OCCASION: (
        "What are you celebrating? (Birthday, Baby Shower, Engagement, Anniversary, "
        "Corporate, or something else?)"
    ),
    BookingField.DATE_TIME: "Which date and preferred time slot would you like?",
    BookingField.GUEST_COUNT: "How many guests are you expecting?",
    BookingField.DECORATION: "Do you need us to arrange decoration as well? (Yes/No)",
    BookingField.CONTACT: (
        "Could you share a contact number so I can reach you quickly if needed?"
    ),
}

GUEST_COUNT_THANKS = "Thanks, {first_name}! {question}"
DATE_TIME_OCCASION_LEAD = "{occasion} sounds lovely! {question}"
DECORATION_FOR_OCCASION = (
    "Would you like us to style {occasion} decor? Please let me know Yes or No."
)

VENUE_PREVIEW_URL = "https://happyhearts.events/preview?utm_source=assistant"
VENUE_PREVIEW = f"Here is our venue preview: {VENUE_PREVIEW_URL}"

PRICE_DISCLAIMER = (
    "Our pricing depends on date, timing & guest count. I can give an exact quote "
    "once I have these 3 details."
)

# Fillers used when a turn would otherwise produce no reply.
FILLER_ALREADY_COMPLETE = "Happy to help with anything else you need—just let me know!"
FILLER_FOLLOW_UP = "I can assist with any other questions or special requests too."
FILLER_KEEP_GOING = (
    "Thanks for the details! Let me know the remaining information so I can keep "
    "everything moving for you."
)
FOLLOW_UP_CUE = "something else you need"

# Confirmation paragraphs
CURRENCY_PREFIX = "Rs."
CONFIRMATION_OPENING = "Wonderful, {first_name}! HAPPY HEARTS is available on {date_time}."
PRICE_BAND_LINE = (
    "For a guest list of around {guest_count}, our packages typically range between "
    "{currency} {low} and {currency} {high} depending on final setup and services."
)
FLEXIBLE_PRICE_LINE = (
    "Our packages are flexible, and I can tailor the pricing once we finalise the "
    "guest count."
)
INCLUSIONS_LINE = (
    "What is included: 4-hour exclusive hall access, lounge seating with premium "
    "linens, ambient lighting, plug-and-play sound system, on-site event coordinator, "
    "and housekeeping support."
)
DECOR_BRIEFING_LINE = "We will include a decor briefing so the theme feels just right."
OWN_DECOR_LINE = (
    "We can keep the space ready for your own decor team, or arrange decor later if "
    "you change your mind."
)
ADVANCE_PAYMENT_LINE = (
    "To lock in your booking we take a Rs. 10,000 advance (UPI or bank transfer) with "
    "the balance due on the event day."
)
CLOSING_LINE = (
    "Let me know if you'd like me to reserve the slot or help with any custom requests."
)

MESSAGE_TOO_LONG = "That was quite long. Could you keep it under {limit} characters for me?"
