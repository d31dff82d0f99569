DEFAULT_SHELL_NAME = "My Shell"
DEFAULT_TERMINATOR = ">"

# bulk-load stops once the alias table holds this many entries
MAX_ALIASES = 10

# alias file lines are "<alias><ALIAS_SEPARATOR><command line>"
ALIAS_SEPARATOR = " "

STOP = "STOP"
SETSHELLNAME = "SETSHELLNAME"
SETTERMINATOR = "SETTERMINATOR"
NEWNAME = "NEWNAME"
READNEWNAMES = "READNEWNAMES"
LISTNEWNAMES = "LISTNEWNAMES"
SAVENEWNAMES = "SAVENEWNAMES"
