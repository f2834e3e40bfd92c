from models import db
from sqlalchemy.orm import relationship

class Teacher(db.Model):
    __tablename__ = "teachers"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, unique=True)
    instruments = db.Column(db.JSON, nullable=False, default=list)

    user = relationship("User", back_populates="teacher")
    lessons = relationship("Lesson", back_populates="teacher")

    def __repr__(self):
        return f"<Teacher {self.user.full_name if self.user else self.id}>"

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.user.full_name if self.user else None,
            "instruments": self.instruments or []
        }
