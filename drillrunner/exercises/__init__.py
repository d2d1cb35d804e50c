"""Reference solutions to the exercise topics."""