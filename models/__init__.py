from flask_sqlalchemy import SQLAlchemy

# Initialize SQLAlchemy
db = SQLAlchemy()

# Import models
from models.users import User
from models.teachers import Teacher
from models.students import Student
from models.rooms import Room
from models.lessons import Lesson, LESSON_STATUSES
