"""
QuizBoard GUI styles.
"""
