from models import db
from sqlalchemy.orm import relationship

class Room(db.Model):
    __tablename__ = "rooms"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)

    lessons = relationship("Lesson", back_populates="room")

    def __repr__(self):
        return f"<Room {self.name}>"
