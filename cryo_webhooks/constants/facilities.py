# Datos estáticos de los centros de US Cryotherapy.
# Se sirven a través de FacilityCache como si vinieran de una API externa.

VALID_CENTERS = ['davis', 'roseville', 'pleasanton', 'fort cavazos']

CENTERS = {
    'davis': {
        'services': [
            {'name': 'whole-body cryotherapy', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-davis/whole-body'},
            {'name': 'cryo facial', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-davis/facial'},
        ],
        'general_booking_link': 'https://hirefrederick.com/us-cryotherapy-davis',
        'business_link': 'https://g.co/kgs/zufxqGm',
        'hours': 'Mon-Fri: 10am-6pm, Sat: 10am-4pm, Sun: Closed',
    },
    'roseville': {
        'services': [
            {'name': 'whole-body cryotherapy', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-roseville/whole-body'},
            {'name': 'localized treatments', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-roseville/localized'},
        ],
        'general_booking_link': 'https://hirefrederick.com/us-cryotherapy-roseville',
        'business_link': 'https://g.co/kgs/d1SZgA2',
        'hours': 'Mon-Fri: 9am-7pm, Sat: 9am-5pm, Sun: 10am-4pm',
    },
    'pleasanton': {
        'services': [
            {'name': 'cryo facial', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-pleasanton/facial'},
            {'name': 'localized treatments', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-pleasanton/localized'},
        ],
        'general_booking_link': 'https://hirefrederick.com/us-cryotherapy-pleasanton',
        'business_link': 'https://g.co/kgs/duuTmC6',
        'hours': 'Mon-Fri: 10am-6pm, Sat: 10am-4pm, Sun: Closed',
    },
    'fort cavazos': {
        'services': [
            {'name': 'whole-body cryotherapy', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-fort-cavazos/whole-body'},
            {'name': 'cryo facial', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-fort-cavazos/facial'},
            {'name': 'localized treatments', 'booking_link': 'https://hirefrederick.com/us-cryotherapy-fort-cavazos/localized'},
        ],
        'general_booking_link': 'https://hirefrederick.com/us-cryotherapy-fort-cavazos',
        'business_link': 'https://g.co/kgs/dgh16ZW',
        'hours': 'Mon-Fri: 8am-8pm, Sat-Sun: 9am-5pm',
    },
}
