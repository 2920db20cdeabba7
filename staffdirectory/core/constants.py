GENDERS = {
    0: "male",
    1: "female",
    2: "other",
}
