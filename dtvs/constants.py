"""Sub-type tokens used to route a spec file to its datetime runner."""

Extractor = "Extractor"
Parser = "Parser"
Model = "Model"
Base = "Base"
Merged = "Merged"

# Model options encoded in the sub-type, e.g. DateTimeModelSplitDateAndTime
SplitDateAndTime = "SplitDateAndTime"
Calendar = "Calendar"

# Platform tag matched against a case's NotSupported / NotSupportedByDesign lists
DEFAULT_PLATFORM = "python"
