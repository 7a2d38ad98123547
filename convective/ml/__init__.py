"""NumPy backend, linear model, cross-entropy loss, gradient descent and metrics."""