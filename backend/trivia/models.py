from datetime import datetime, timezone
import random
import string

from trivia import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_passcode(length=4):
    """Generate a random numeric join passcode."""
    return ''.join(random.choices(string.digits, k=length))


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    passcode = db.Column(db.String(4), nullable=False)
    # The most recently created game is the current one
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    teams = db.relationship('Team', back_populates='game', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'passcode': self.passcode,
        }


class Team(db.Model):
    __tablename__ = 'team'
    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('game.id'), nullable=False, index=True)
    name = db.Column(db.String(128), nullable=False)
    game_code = db.Column(db.String(4), nullable=True)  # passcode used to join
    game = db.relationship('Game', back_populates='teams')
    answers = db.relationship('Answer', back_populates='team', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'game_code': self.game_code,
        }


class Answer(db.Model):
    __tablename__ = 'answer'
    id = db.Column(db.Integer, primary_key=True)
    # (team_id, question_number) is unique, enforced by the submission service
    team_id = db.Column(db.Integer, db.ForeignKey('team.id'), nullable=False, index=True)
    question_number = db.Column(db.Integer, nullable=False, index=True)
    answer = db.Column(db.Text, nullable=True)
    bonus_answer = db.Column(db.Text, nullable=True)
    # Wagered by the team
    chosen_points = db.Column(db.Float, nullable=False, default=0)
    # Granted by the host
    awarded_points = db.Column(db.Float, nullable=False, default=0)
    team = db.relationship('Team', back_populates='answers')

    def to_dict(self):
        return {
            'id': self.id,
            'team_id': self.team_id,
            'question_number': self.question_number,
            'answer': self.answer,
            'bonus_answer': self.bonus_answer,
            'chosen_points': self.chosen_points,
            'awarded_points': self.awarded_points,
        }


class QuestionCategory(db.Model):
    __tablename__ = 'question_category'
    question_number = db.Column(db.Integer, primary_key=True, autoincrement=False)
    category = db.Column(db.String(128), nullable=False, default='')
    icon = db.Column(db.String(32), nullable=False, default='')

    def to_dict(self):
        return {
            'question_number': self.question_number,
            'category': self.category,
            'icon': self.icon,
        }
