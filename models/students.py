from models import db
from sqlalchemy.orm import relationship

class Student(db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, unique=True)

    user = relationship("User", back_populates="student")
    lessons = relationship("Lesson", back_populates="student")

    @property
    def is_active(self):
        return bool(self.user and self.user.is_active)

    def __repr__(self):
        return f"<Student {self.user.full_name if self.user else self.id}>"

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.user.full_name if self.user else None
        }
