from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db

def home_index():
    return jsonify({
        "message": "Student feedback service is running",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except SQLAlchemyError as e:
        db.session.rollback()
        db_status = f"unhealthy: {str(e)}"

    status = 200 if db_status == "healthy" else 503
    return jsonify({
        "status": "online",
        "database": db_status,
    }), status
