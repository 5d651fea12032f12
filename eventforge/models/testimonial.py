"""
Testimonial Model
"""

from eventforge.extensions import db


class Testimonial(db.Model):
    """Client quote with a 1-5 star rating"""
    __tablename__ = 'testimonials'

    id = db.Column(db.Integer, primary_key=True)
    rating = db.Column(db.Integer, nullable=False)
    content = db.Column(db.Text, nullable=False)
    author = db.Column(db.Text, nullable=False)
    position = db.Column(db.Text, nullable=False)
    avatar_initials = db.Column(db.String(4), nullable=False)

    __table_args__ = (
        db.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_testimonials_rating'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'rating': self.rating,
            'content': self.content,
            'author': self.author,
            'position': self.position,
            'avatar_initials': self.avatar_initials,
        }

    def __repr__(self):
        return f'<Testimonial {self.author} {self.rating}*>'
