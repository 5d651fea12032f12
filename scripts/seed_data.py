"""
Load the sample portfolio items and testimonials into empty tables.
"""
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eventforge import create_app  # noqa: E402
from eventforge.seed import seed_sample_data  # noqa: E402
from eventforge.storage import get_storage  # noqa: E402

app = create_app()

with app.app_context():
    items, testimonials = seed_sample_data(get_storage())
    print(f'Seeded {items} portfolio items and {testimonials} testimonials')
