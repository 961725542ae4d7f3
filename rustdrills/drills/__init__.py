"""Reference implementations of many of the exercise programs."""