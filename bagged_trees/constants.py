# Target levels, negative level first (votes tie toward it)
CLASSES = ['no', 'yes']
NEGATIVE_CLASS = 'no'
POSITIVE_CLASS = 'yes'

TARGET = 'target'

# Ensemble size and seed used by the bagging walkthrough
N_MODELS = 100
SEED = 42

# Shared hyperparameters applied to every tree in the ensemble
TREE_PARAMS = {
    'criterion': 'gini',
    'max_depth': None,
    'min_samples_split': 2,
    'min_samples_leaf': 1,
}

AGGREGATE_NAME = 'bagging'

# Metrics shown in the comparison boxplots
PLOT_METRICS = [
    'accuracy', 'kappa', 'sensitivity', 'specificity',
    'precision', 'recall', 'f1', 'balanced_accuracy',
]

# Output directories
OUTPUT_DIR = r'outputs'
BOXPLOT_DIR = r'outputs/metric_boxplots'
