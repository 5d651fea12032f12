"""
Sample Content

Showcase portfolio items and testimonials for a fresh install. Only loaded
into empty tables, so re-running is harmless.
"""

import logging

logger = logging.getLogger(__name__)

_IMAGE = 'https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=450&q=80'

SAMPLE_PORTFOLIO = [
    {
        'title': 'Annual Tech Summit',
        'category': 'Corporate Conference',
        'image_url': 'https://images.unsplash.com/photo-1511795409834-ef04bbd61622'
                     '?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=1000&q=80',
        'description': 'A premier tech industry gathering hosting over 1,500 professionals from leading companies.',
        'overview': 'A premier tech industry gathering hosting over 1,500 professionals from leading companies. '
                    'The event featured keynote speakers, panel discussions, and interactive workshops across '
                    'three days.',
        'role': [
            'Full venue coordination and management',
            'Speaker and VIP logistics coordination',
            'Custom stage and multimedia production',
            'Catering and refreshment services',
            'Networking event facilitation',
            'Technical support throughout the conference',
        ],
        'results': 'The summit received a 94% satisfaction rating from attendees, with 87% expressing intent to '
                   'return for the next event. Speaker engagement metrics exceeded industry averages by 23%.',
        'tags': ['Technology', 'Corporate', 'Conference'],
        'featured': True,
    },
    {
        'title': 'Johnson Wedding',
        'category': 'Luxury Wedding',
        'image_url': _IMAGE.format('photo-1519167758481-83f550bb49b3'),
        'description': 'An elegant wedding with custom floral arrangements and live entertainment.',
        'overview': 'A luxury wedding celebration for 200 guests featuring bespoke decor, gourmet catering, and '
                    'seamless coordination of all vendors and entertainment.',
        'role': [
            'Complete wedding planning and coordination',
            'Custom decor and floral design',
            'Vendor selection and management',
            'Day-of coordination and timeline management',
            'Guest experience planning',
        ],
        'results': "Created a flawless celebration that exceeded the couple's expectations while managing all "
                   'logistics and vendor coordination without a single issue.',
        'tags': ['Wedding', 'Luxury', 'Celebration'],
        'featured': True,
    },
    {
        'title': 'SoundWave Festival',
        'category': 'Music Festival',
        'image_url': _IMAGE.format('photo-1501281668745-f7f57925c3b4'),
        'description': 'A three-day music festival featuring over 40 artists across multiple stages.',
        'overview': 'A major music festival attracting over 25,000 attendees daily with multiple stages, food '
                    'vendors, and interactive experiences.',
        'role': [
            'Complete festival logistics and production',
            'Artist coordination and scheduling',
            'Security and crowd management',
            'Vendor management',
            'Stage production',
        ],
        'results': "Successfully managed one of the region's largest music festivals with zero safety incidents "
                   'and 92% positive attendee feedback.',
        'tags': ['Music', 'Festival', 'Entertainment'],
        'featured': False,
    },
    {
        'title': 'Nova Phone Launch',
        'category': 'Product Launch',
        'image_url': _IMAGE.format('photo-1540575467063-178a50c2df87'),
        'description': 'A high-profile product launch event with media coverage and interactive demos.',
        'overview': "A high-profile product launch for a major tech company's flagship smartphone, featuring "
                    'interactive demo stations, media presentations, and VIP reception.',
        'role': [
            'Event concept development',
            'Media coordination',
            'Demo station setup',
            'Technical production',
            'Celebrity host management',
        ],
        'results': 'Generated over 3 million social media impressions and secured coverage in 45+ major tech '
                   'publications.',
        'tags': ['Technology', 'Product Launch', 'Corporate'],
        'featured': False,
    },
    {
        'title': 'Hope Foundation Gala',
        'category': 'Charity Event',
        'image_url': _IMAGE.format('photo-1505373877841-8d25f7d46678'),
        'description': 'An annual fundraising gala that raised over $1.2 million for youth education programs.',
        'overview': 'An elegant charity gala dinner for 500 guests with silent and live auctions, entertainment, '
                    'and fundraising activities.',
        'role': [
            'Full event planning and coordination',
            'Fundraising strategy',
            'Auction management',
            'Sponsor coordination',
            'Entertainment booking',
        ],
        'results': 'Raised 40% more funds than the previous year, with a total of $1.2 million for youth '
                   'education initiatives.',
        'tags': ['Charity', 'Fundraising', 'Gala'],
        'featured': False,
    },
    {
        'title': 'Apex Team Retreat',
        'category': 'Corporate Retreat',
        'image_url': _IMAGE.format('photo-1560439514-4e9645039924'),
        'description': 'A three-day corporate retreat focused on team building and strategic planning.',
        'overview': 'A comprehensive corporate retreat for 120 executives including workshops, team-building '
                    'activities, and wellness sessions at a luxury resort.',
        'role': [
            'Location scouting and selection',
            'Activity planning and facilitation',
            'Accommodation and travel coordination',
            'Meeting space setup',
            'Wellness program development',
        ],
        'results': 'Post-event survey showed a 35% improvement in team cohesion metrics and 28% increase in '
                   'strategic alignment scores.',
        'tags': ['Corporate', 'Retreat', 'Team Building'],
        'featured': False,
    },
]

SAMPLE_TESTIMONIALS = [
    {
        'rating': 5,
        'content': 'EventForge made our corporate anniversary event absolutely flawless. Their attention to '
                   'detail and creativity exceeded our expectations.',
        'author': 'Sarah Bennett',
        'position': 'Marketing Director, TechCorp',
        'avatar_initials': 'SB',
    },
    {
        'rating': 5,
        'content': 'Our wedding was a dream come true thanks to EventForge. They handled everything with such '
                   'care and professionalism.',
        'author': 'Alex & Maya Rodriguez',
        'position': 'Wedding Clients',
        'avatar_initials': 'AM',
    },
    {
        'rating': 5,
        'content': 'The SoundWave Festival was a massive undertaking, but EventForge managed it brilliantly. '
                   'From logistics to artist coordination, they nailed every aspect.',
        'author': 'Jason Lee',
        'position': 'Event Director, Rhythm Productions',
        'avatar_initials': 'JL',
    },
    {
        'rating': 5,
        'content': "Our fundraising gala raised 40% more than last year, and I credit EventForge's strategic "
                   'planning and execution. They understood our mission and delivered perfectly.',
        'author': 'Elena Martinez',
        'position': 'Director, Hope Foundation',
        'avatar_initials': 'EM',
    },
]


def seed_sample_data(storage):
    """Fill empty portfolio and testimonial tables with the samples.

    Returns ``(portfolio_count, testimonial_count)`` of rows created.
    """
    created_items = 0
    created_testimonials = 0

    if not storage.portfolio.list():
        for item in SAMPLE_PORTFOLIO:
            storage.portfolio.create(item)
            created_items += 1

    if not storage.testimonials.list():
        for testimonial in SAMPLE_TESTIMONIALS:
            storage.testimonials.create(testimonial)
            created_testimonials += 1

    if created_items or created_testimonials:
        logger.info('Seeded %d portfolio items and %d testimonials', created_items, created_testimonials)
    return created_items, created_testimonials
