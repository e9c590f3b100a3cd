from .api import FeaturePoliciesView, FeaturePolicyDetailView
from .screen import FeaturePoliciesScreenView
