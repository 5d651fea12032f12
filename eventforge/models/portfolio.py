"""
Portfolio Item Model
"""

from eventforge.extensions import db


class PortfolioItem(db.Model):
    """A past event shown in the public portfolio"""
    __tablename__ = 'portfolio_items'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False)
    venue = db.Column(db.Text)
    image_url = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    overview = db.Column(db.Text, nullable=False)
    # Ordered list of responsibilities
    role = db.Column(db.JSON, nullable=False, default=list)
    results = db.Column(db.Text, nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    featured = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'category': self.category,
            'venue': self.venue,
            'image_url': self.image_url,
            'description': self.description,
            'overview': self.overview,
            'role': list(self.role or []),
            'results': self.results,
            'tags': list(self.tags or []),
            'featured': bool(self.featured),
        }

    def __repr__(self):
        return f'<PortfolioItem {self.title}>'
