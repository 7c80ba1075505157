# Author: Bradley R. Kinnard
# config module - built-in defaults and input schemas
