"""A managed heap of 64-bit slots with owned and borrowed pointers."""