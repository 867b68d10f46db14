# perceptron/__init__.py
# Toy gradient-descent trainer with closed-form derivatives (no AAD)

from .single_layer import SingleLayerPerceptron, TrainerConfig

__all__ = [
    'SingleLayerPerceptron',
    'TrainerConfig',
]
