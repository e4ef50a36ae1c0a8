GENERAL_KNOWLEDGE_QUIZ = {
    "title": "General Knowledge Quiz",
    "description": "Test your general knowledge with these 5 questions!",
    "questions": [
        {
            "question_text": "What is the capital of Australia?",
            "options": ["Sydney", "Canberra", "Melbourne", "Perth"],
            "correct_answer": "B"
        },
        {
            "question_text": "Which planet is known as the Red Planet?",
            "options": ["Venus", "Jupiter", "Mars", "Saturn"],
            "correct_answer": "C"
        },
        {
            "question_text": "What is the largest mammal in the world?",
            "options": [
                "Blue Whale",
                "African Elephant",
                "Giraffe",
                "Hippopotamus"
            ],
            "correct_answer": "A"
        },
        {
            "question_text": "In which year did World War II end?",
            "options": ["1943", "1944", "1946", "1945"],
            "correct_answer": "D"
        },
        {
            "question_text": "What is the chemical symbol for gold?",
            "options": ["Go", "Au", "Ag", "Gd"],
            "correct_answer": "B"
        }
    ]
}
