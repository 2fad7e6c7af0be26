from noteful import create_app

app = create_app()
