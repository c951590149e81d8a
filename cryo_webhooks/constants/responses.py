# Textos de respuesta para Dialogflow

# --- Intake (nombre, email, teléfono) ---

MISSING_INFO_TEXT = (
    "I seem to be missing some information. Could you please provide your "
    "full name, email address, and phone number?"
)

INVALID_FIELD_PHRASES = {
    'name': 'full name (first and last, letters only)',
    'email': 'email address',
    'phone': 'phone number',
}

INVALID_INFO_TEXT = "Hmm, some of the details you gave don't look right. Please provide a valid {fields}."

SAVE_ERROR_TEXT = (
    "I'm sorry, I encountered an error while trying to save your information. "
    "Please try again later."
)

CONFIRMATION_EMAIL_SUBJECT = "We received your details - US Cryotherapy"

CONFIRMATION_EMAIL_TEXT = (
    "Hi {name},\n\n"
    "Thanks for reaching out to US Cryotherapy! We've received your contact details "
    "and will be in touch soon to help you book your session.\n\n"
    "- The US Cryotherapy team"
)

CONFIRMATION_EMAIL_HTML = (
    "<p>Hi {name},</p>"
    "<p>Thanks for reaching out to <strong>US Cryotherapy</strong>! We've received your "
    "contact details and will be in touch soon to help you book your session.</p>"
    "<p>- The US Cryotherapy team</p>"
)

# --- FAQ ---

BOOKING_CONFIRMATIONS = [
    "Awesome! You can book your {service} at {center} here: {booking_link} You’re making a great choice—let me know if you need anything else! 😊",
    "Great pick! Book your {service} at {center} with this link: {booking_link} Any questions? I’m here to help!",
    "You’re all set! Schedule your {service} at {center} here: {booking_link} Excited for you—let me know if you need more assistance! 😊",
]

EXPLANATIONS = [
    "Cryotherapy is a fantastic way to boost recovery! It uses cold temps to reduce inflammation, lift your energy, and even improve your mood—all in just a few minutes. Want to try it? I can help you book! 😊",
    "Cryotherapy speeds up recovery with cold temperatures that ease inflammation and boost energy. It’s quick, safe, and feels amazing! Ready to book a session? 😊",
    "With cryotherapy, you get less inflammation, better mood, and more energy in just minutes! It’s a wellness game-changer. Shall I help you book? 😊",
]

INVALID_CENTER_TEXT = (
    "Oops! {center} isn’t one of our centers. We have Davis, Roseville, Pleasanton, "
    "and Fort Cavazos. Which one would you like?"
)

INVALID_SERVICE_TEXT = "Hmm, that service doesn’t look right. Could you specify it again?"

ASK_CENTER_TEXT = (
    "Hi! I’m Jen, your US Cryotherapy assistant. Which center would you like to visit? "
    "We’ve got Davis, Roseville, Pleasanton, and Fort Cavazos!"
)

SERVICE_AVAILABLE_TEXT = "Hi! I’m Jen. We offer {service} at {centers}. Which location works for you?"

SERVICE_UNAVAILABLE_TEXT = "Hi! I’m Jen. Sorry, {service} isn’t available at our centers. Can I help with something else?"

SERVICE_NOT_OFFERED_TEXT = (
    "Sorry, {service} isn’t offered at {center}. We have {services}. "
    "Book here: {booking_link} Need help picking?"
)

RESCHEDULE_TEXT = (
    "To reschedule at {center}, please call them directly. Contact info here: "
    "{business_link} They’ll sort it out for you!"
)

RESCHEDULE_ASK_CENTER_TEXT = "Please call your center to reschedule. Tell me which one, and I’ll get you the contact link!"

CONCERNS_TEXT = (
    "No stress! Cryotherapy is safe, fast (2-3 minutes), and super refreshing. "
    "Our staff guides you every step. Any specific worries I can ease? 😊"
)

CENTER_INFO_TEXT = (
    "Here’s the scoop on {center}:\n"
    "- **Services**: {services}\n"
    "- **Hours**: {hours}\n"
    "- **More Info**: {business_link}\n"
    "Want to book?"
)

CENTER_INFO_ASK_CENTER_TEXT = (
    "We’ve got centers in Davis, Roseville, Pleasanton, and Fort Cavazos. "
    "Which one are you curious about?"
)

FALLBACK_TEXT = (
    "Oops, I didn’t catch that! I can book appointments, explain cryotherapy, "
    "or share center info. What’s on your mind? 😊"
)

FAQ_ERROR_TEXT = "Sorry, something went wrong on my end. Try again soon!"

LIVENESS_TEXT = 'Webhook is running! Send POST requests to /api/webhook'
