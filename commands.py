import click
from flask.cli import AppGroup
from models import db
from models.users import User
from classes.checkin_manager import CheckInManager
from classes.errors import CheckInError
from utils.helpers import format_datetime, parse_date, today

checkin_cli = AppGroup("checkin", help="Lesson check-in maintenance.")


def print_lesson(lesson):
    click.echo(f"   Lesson ID: {lesson.id}")
    if lesson.teacher and lesson.teacher.user:
        click.echo(f"   Teacher: {lesson.teacher.user.full_name}")
    if lesson.student and lesson.student.user:
        click.echo(f"   Student: {lesson.student.user.full_name}")
    click.echo(f"   Time: {lesson.start_time} - {lesson.end_time}")
    if lesson.room:
        click.echo(f"   Room: {lesson.room.name}")


@checkin_cli.command("lesson")
@click.argument("lesson_id")
def checkin_lesson(lesson_id):
    """Set the teacher check-in of LESSON_ID to now."""
    try:
        checked_in_at = CheckInManager.check_in_teacher(lesson_id)
    except CheckInError as e:
        raise click.ClickException(e.message)
    click.echo(f"✅ Teacher checked in to lesson {lesson_id} at {format_datetime(checked_in_at)}")


@checkin_cli.command("teacher-now")
def checkin_teacher_now():
    """Check the teacher in to the first lesson of today still waiting for them."""
    lesson = CheckInManager.next_unchecked_lesson(today())
    if not lesson:
        click.echo("❌ No lessons found that need teacher check-in")
        return

    CheckInManager.check_in_teacher(lesson.id)
    click.echo("✅ TEACHER CHECKED IN!")
    print_lesson(lesson)


@checkin_cli.command("teacher")
@click.argument("first_name")
@click.argument("last_name")
def checkin_teacher(first_name, last_name):
    """Check a teacher in to all of their remaining lessons today."""
    teacher = CheckInManager.find_teacher_by_name(first_name, last_name)
    if not teacher:
        raise click.ClickException(f"Teacher not found: {first_name} {last_name}")

    lessons = CheckInManager.check_in_remaining(teacher)
    click.echo(f"Found {len(lessons)} remaining lesson(s) for {teacher.user.full_name}")
    if not lessons:
        click.echo("No remaining lessons to check in to")
        return

    for lesson in lessons:
        click.echo("✅ Checked in to lesson:")
        print_lesson(lesson)
    click.echo(f"🎯 {teacher.user.full_name} is now checked in to all {len(lessons)} remaining lessons!")


@checkin_cli.command("verify")
@click.option("--date", "day", default=None, help="Day to inspect (YYYY-MM-DD), defaults to today.")
def verify_checkin(day):
    """List a day's scheduled lessons with their check-in state."""
    try:
        day = parse_date(day, default=today())
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--date")

    lessons = CheckInManager.lessons_for_day(day)
    click.echo(f"Found {len(lessons)} lesson(s) for {day.isoformat()}:")
    for lesson in lessons:
        teacher_state = format_datetime(lesson.teacher_check_in) or "not checked in"
        student_state = format_datetime(lesson.student_check_in) or "not checked in"
        click.echo(f"🔍 {lesson.start_time}-{lesson.end_time} {lesson.id}")
        click.echo(f"   Teacher: {teacher_state}")
        click.echo(f"   Student: {student_state}")


users_cli = AppGroup("users", help="User account maintenance.")


@users_cli.command("create-admin")
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--first-name", default="Admin")
@click.option("--last-name", default="User")
def create_admin(email, password, first_name, last_name):
    """Create an admin account, or report the existing one."""
    existing = User.query.filter_by(email=email).first()
    if existing:
        click.echo(f"Admin already exists: {existing.email} ({existing.role})")
        return

    admin = User(email=email, first_name=first_name, last_name=last_name, role="admin")
    admin.set_password(password)
    db.session.add(admin)
    db.session.commit()
    click.echo(f"✅ Admin created: {email}")


@users_cli.command("set-password")
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
def set_password(email, password):
    user = User.query.filter_by(email=email).first()
    if not user:
        raise click.ClickException("User not found!")

    user.set_password(password)
    db.session.commit()
    click.echo("Password updated successfully!")
